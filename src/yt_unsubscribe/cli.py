"""CLI entry point for yt-unsubscribe."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from yt_unsubscribe.core.config import Settings
from yt_unsubscribe.core.errors import (
    AuthenticationError,
    LoadTimeoutExceeded,
    MissingCredentialsError,
    NavigationError,
    UnsubscribeError,
)
from yt_unsubscribe.core.logging import ErrorIds, enable_file_logging, logError, set_log_level
from yt_unsubscribe.core.session import run_session
from yt_unsubscribe.models.outcome import ItemOutcome
from yt_unsubscribe.models.report import RunResult

console = Console()

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_INTERRUPTED = 130

_ERROR_IDS: dict[type[UnsubscribeError], str] = {
    MissingCredentialsError: ErrorIds.MISSING_CREDENTIALS,
    AuthenticationError: ErrorIds.AUTHENTICATION_FAILED,
    NavigationError: ErrorIds.NAVIGATION_FAILED,
    LoadTimeoutExceeded: ErrorIds.LOAD_TIMEOUT,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Unsubscribe from every YouTube channel on the signed-in account"
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load environment variables from this file (default: .env if present)",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window (default: headless)",
    )
    parser.add_argument(
        "--session-dir",
        type=Path,
        default=None,
        help="Directory for a persistent browser profile (default: fresh profile)",
    )
    parser.add_argument(
        "--max-scroll-polls",
        type=int,
        default=None,
        help="Give up loading the list after this many scrolls (default: unbounded)",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Console log level (default: info)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write debug-level logs to this file",
    )
    return parser


def render_summary(result: RunResult) -> Table:
    """Build the end-of-run counters table."""
    table = Table(title="Unsubscribe Summary")
    table.add_column("Counter", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Channels found", str(result.total))
    table.add_row("Attempted", str(result.attempted))
    table.add_row("Removed", f"[green]{result.removed}[/green]")
    table.add_row("Skipped (already gone)", str(result.skipped))
    table.add_row("Warned (menu missing)", str(result.menu_missing))
    table.add_row("Warned (confirm missing)", str(result.confirm_missing))
    table.add_row("Errored", f"[red]{result.errored}[/red]" if result.errored else "0")
    return table


def render_problems(result: RunResult) -> Table | None:
    """Build a table of items that were not removed, or None if all were."""
    problems = [
        item for item in result.items
        if item.outcome not in (ItemOutcome.REMOVED, ItemOutcome.SKIPPED_ALREADY_GONE)
    ]
    if not problems:
        return None
    table = Table(title="Items Needing Attention")
    table.add_column("#", justify="right")
    table.add_column("Outcome", style="yellow")
    table.add_column("Detail", overflow="fold")
    for item in problems:
        table.add_row(str(item.ordinal), item.outcome.value, item.detail)
    return table


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    set_log_level(args.log_level)
    if args.log_file:
        enable_file_logging(args.log_file)

    console.print(Panel.fit(
        "[bold cyan]yt-unsubscribe[/bold cyan]\n"
        "[dim]Bulk unsubscribe from YouTube channels[/dim]"
    ))

    try:
        settings = Settings.from_env(
            env_file=args.env_file,
            headless=False if args.headed else None,
            user_data_dir=args.session_dir,
            max_scroll_polls=args.max_scroll_polls,
        )
        result = run_session(settings)

    except KeyboardInterrupt:
        logError(ErrorIds.KEYBOARD_INTERRUPT, "Interrupted by user; run aborted")
        console.print("\n[yellow]Interrupted. No summary available.[/yellow]")
        return EXIT_INTERRUPTED

    except UnsubscribeError as e:
        logError(_ERROR_IDS.get(type(e), ErrorIds.UNEXPECTED_ERROR), str(e))
        console.print(f"\n[red]Fatal Error in Automation: {e}[/red]")
        return EXIT_FATAL

    except Exception as e:
        logError(ErrorIds.UNEXPECTED_ERROR, "Fatal Error in Automation", exc_info=True)
        console.print(f"\n[red]Fatal Error in Automation: {e}[/red]")
        return EXIT_FATAL

    console.print()
    console.print(render_summary(result))
    problems = render_problems(result)
    if problems is not None:
        console.print(problems)
    console.print(f"\n[bold green]Total channels deleted: {result.removed}[/bold green]")
    return EXIT_OK


def run() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())


if __name__ == "__main__":
    run()
