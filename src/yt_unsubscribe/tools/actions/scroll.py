"""Scroll action for page automation.

This module provides scroll_to_bottom, which scrolls the document to
its maximum extent and counts matching rows in the same evaluation.
"""

from playwright.sync_api import Page

_SCROLL_AND_COUNT_JS = """
(selector) => {
    window.scrollTo(0, document.documentElement.scrollHeight);
    return document.querySelectorAll(selector).length;
}
"""


def scroll_to_bottom(page: Page, count_selector: str) -> int:
    """Scroll to the bottom of the page and count matching elements.

    Args:
        page: The Playwright Page object.
        count_selector: CSS selector of the rows to count.

    Returns:
        The number of elements matching count_selector after the scroll.

    Note:
        Unlike the other actions this propagates errors: a page that
        cannot be scrolled leaves the loader with nothing to poll.
    """
    return int(page.evaluate(_SCROLL_AND_COUNT_JS, count_selector))
