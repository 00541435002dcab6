"""Press action for page automation."""

from playwright.sync_api import Page

from yt_unsubscribe.models.result import ActionResult, failure_result, success_result


def press(page: Page, key: str) -> ActionResult:
    """Press a keyboard key.

    Args:
        page: The Playwright Page object.
        key: The key to press (e.g., "Enter", "Escape", "Control+A").

    Returns:
        ActionResult indicating success or failure with a descriptive message.
    """
    try:
        page.keyboard.press(key)

        return success_result(message=f"Successfully pressed key {key!r}")

    except Exception as e:
        return failure_result(
            message=f"Failed to press key {key!r}",
            error=str(e),
        )
