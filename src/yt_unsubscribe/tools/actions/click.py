"""Click action for page automation.

Works on anything Playwright can click: a Locator for live queries
(menu items, dialog buttons) or an ElementHandle from a snapshot.
"""

from playwright.sync_api import ElementHandle, Locator, TimeoutError as PlaywrightTimeoutError

from yt_unsubscribe.models.result import ActionResult, failure_result, success_result


def click(
    target: Locator | ElementHandle,
    description: str,
    timeout: float = 30000,
) -> ActionResult:
    """Click a locator or element handle.

    Args:
        target: The Playwright Locator or ElementHandle to click.
        description: Short description of the target, for messages.
        timeout: Maximum time to wait for click to complete (ms). Default: 30000.

    Returns:
        ActionResult indicating success or failure with a descriptive message.
    """
    try:
        target.click(timeout=timeout)

        return success_result(message=f"Successfully clicked {description}")

    except PlaywrightTimeoutError as e:
        return failure_result(
            message=f"Timeout clicking {description}",
            error=str(e),
            timed_out=True,
        )

    except Exception as e:
        return failure_result(
            message=f"Failed to click {description}",
            error=str(e),
        )
