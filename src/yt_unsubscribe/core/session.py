"""Session orchestration.

Sequences login, list loading, snapshot collection and the unsubscribe
sequencer in a fixed order, inside a browser that is always closed.
"""

from typing import Callable, ContextManager

from playwright.sync_api import Page, Playwright, sync_playwright

from yt_unsubscribe.core.auth import login
from yt_unsubscribe.core.browser import open_page
from yt_unsubscribe.core.collector import collect
from yt_unsubscribe.core.config import Settings
from yt_unsubscribe.core.errors import NavigationError
from yt_unsubscribe.core.loader import ListLoader
from yt_unsubscribe.core.logging import logEvent, logForDebugging
from yt_unsubscribe.core.pacer import Pacer
from yt_unsubscribe.core.sequencer import UnsubscribeSequencer
from yt_unsubscribe.models.report import RunResult
from yt_unsubscribe.tools.actions import navigate


class SessionOrchestrator:
    """Runs one full unsubscribe pass against an open page."""

    def __init__(self, settings: Settings, pacer: Pacer | None = None) -> None:
        self._settings = settings
        self._pacer = pacer or Pacer(settings.pacing)

    def run(self, page: Page) -> RunResult:
        """Log in, load the list, snapshot it and process every element.

        Raises:
            NavigationError: If the home or channels page cannot be loaded.
            AuthenticationError: If sign-in fails.
            LoadTimeoutExceeded: If a scroll poll bound is set and reached.
        """
        settings = self._settings
        selectors = settings.selectors

        login(
            page,
            settings.credentials,
            settings.home_url,
            selectors=selectors,
            timeout_ms=settings.pacing.login_timeout_ms,
        )

        result = navigate(page, settings.channels_url, wait_until="domcontentloaded")
        if not result.success:
            raise NavigationError(f"{result.message}: {result.error}")

        logForDebugging("--- Phase 1: Pre-loading all channels ---", level="info")
        loader = ListLoader(
            self._pacer,
            selectors.channel_row,
            max_polls=settings.pacing.max_scroll_polls,
        )
        loader.load_all(page)

        logForDebugging("--- Phase 2: Starting bulk unsubscribe ---", level="info")
        snapshot = collect(page, selectors.subscribe_button)
        if snapshot.is_empty:
            logForDebugging(
                "No 'Subscribed' buttons found. Check login or ensure subscriptions exist.",
                level="warning",
            )
            result = RunResult()
            logEvent("run_finished", result.counters())
            return result

        sequencer = UnsubscribeSequencer(page, self._pacer, selectors)
        return sequencer.run(snapshot)


def run_session(
    settings: Settings,
    pacer: Pacer | None = None,
    playwright_factory: Callable[[], ContextManager[Playwright]] = sync_playwright,
) -> RunResult:
    """Launch a browser, run one pass, and close the browser.

    The browser is released on every exit path, including exceptions.
    """
    with playwright_factory() as playwright:
        with open_page(
            playwright,
            user_data_dir=settings.user_data_dir,
            headless=settings.headless,
        ) as page:
            return SessionOrchestrator(settings, pacer).run(page)
