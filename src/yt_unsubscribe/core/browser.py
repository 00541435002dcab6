"""Browser lifecycle management.

This module launches a Playwright Chromium browser, either as a fresh
ephemeral context or with persistent storage for session data (cookies,
localStorage), and guarantees it is closed on every exit path.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from playwright.sync_api import BrowserContext, Page, Playwright

from yt_unsubscribe.core.logging import logForDebugging


def launch_persistent_context(
    playwright: Playwright,
    user_data_dir: str | Path,
    headless: bool = True,
) -> BrowserContext:
    """Launch a browser with persistent storage for session data.

    Args:
        playwright: The Playwright instance (from sync_playwright()).
        user_data_dir: Directory where session data is stored. Created
                      if it doesn't exist.
        headless: If True (default), launches without UI.

    Returns:
        A BrowserContext. Closing it also closes the browser.

    Note:
        Only ONE browser instance can use a given user_data_dir at a time.
    """
    Path(user_data_dir).mkdir(parents=True, exist_ok=True)
    return playwright.chromium.launch_persistent_context(
        user_data_dir=str(user_data_dir),
        headless=headless,
    )


def launch_ephemeral_context(playwright: Playwright, headless: bool = True) -> BrowserContext:
    """Launch a fresh browser and return a new context in it.

    The returned context's browser is available as context.browser.
    """
    browser = playwright.chromium.launch(headless=headless)
    try:
        return browser.new_context()
    except Exception:
        browser.close()
        raise


@contextmanager
def open_page(
    playwright: Playwright,
    user_data_dir: str | Path | None = None,
    headless: bool = True,
) -> Iterator[Page]:
    """Open a page and release the browser when the block exits.

    Uses a persistent context when user_data_dir is given, otherwise a
    throwaway one. The browser is closed even if the block raises.
    """
    if user_data_dir is not None:
        context = launch_persistent_context(playwright, user_data_dir, headless=headless)
    else:
        context = launch_ephemeral_context(playwright, headless=headless)

    browser = context.browser
    try:
        pages = context.pages
        page = pages[0] if pages else context.new_page()
        yield page
    finally:
        logForDebugging("Closing browser", level="info")
        context.close()
        if user_data_dir is None and browser is not None:
            browser.close()
