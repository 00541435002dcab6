"""Snapshot collector.

Resolves every matching action control once, in document order. The
result is taken as ground truth for the whole run: re-collecting per
item would let rows shift mid-iteration and be processed twice or not
at all.
"""

from playwright.sync_api import Page

from yt_unsubscribe.core.logging import logEvent
from yt_unsubscribe.models.snapshot import ActionableElement, Snapshot


def collect(page: Page, selector: str) -> Snapshot:
    """Capture all elements currently matching selector.

    An empty snapshot means either nothing to do or a precondition
    failure (not signed in, selector drift); the two cannot be told
    apart from here.

    Args:
        page: The Playwright Page object.
        selector: CSS selector of the primary action controls.

    Returns:
        A Snapshot with 1-based ordinals in document order.
    """
    handles = page.query_selector_all(selector)
    snapshot = Snapshot(
        elements=tuple(
            ActionableElement(handle=handle, ordinal=ordinal)
            for ordinal, handle in enumerate(handles, start=1)
        )
    )
    logEvent("snapshot_collected", {"elements": len(snapshot)})
    return snapshot
