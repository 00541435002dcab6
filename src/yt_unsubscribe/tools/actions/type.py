"""Type action for page automation.

This module provides the type_ function for filling input fields
once they appear.
"""

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from yt_unsubscribe.models.result import ActionResult, failure_result, success_result


def type_(
    page: Page,
    selector: str,
    text: str,
    timeout: float = 30000,
    secret: bool = False,
) -> ActionResult:
    """Wait for an input to appear, then fill it with text.

    Args:
        page: The Playwright Page object.
        selector: CSS selector of the input element.
        text: The text to type into the element.
        timeout: Maximum time to wait for the input (ms). Default: 30000.
        secret: If True, the text is never echoed in messages.

    Returns:
        ActionResult indicating success or failure with a descriptive message.
    """
    shown = "***" if secret else repr(text)
    try:
        page.wait_for_selector(selector, timeout=timeout)
        page.fill(selector, text, timeout=timeout)

        return success_result(message=f"Successfully typed {shown} into {selector!r}")

    except PlaywrightTimeoutError as e:
        return failure_result(
            message=f"Timeout waiting for input {selector!r}",
            error=str(e),
            timed_out=True,
        )

    except Exception as e:
        return failure_result(
            message=f"Failed to type into {selector!r}",
            error=str(e),
        )
