"""Sign-in flow for a Google account on YouTube.

The flow is linear: if the masthead shows no "Sign in" button the
session is treated as already authenticated, which is not an error.
"""

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from yt_unsubscribe.core.config import Credentials, SelectorConfig
from yt_unsubscribe.core.errors import AuthenticationError, NavigationError
from yt_unsubscribe.core.logging import logEvent, logForDebugging
from yt_unsubscribe.models.result import ActionResult
from yt_unsubscribe.tools.actions import click, navigate, press, type_


def _require(result: ActionResult) -> None:
    if not result.success:
        raise AuthenticationError(f"{result.message}: {result.error}")


def login(
    page: Page,
    credentials: Credentials,
    home_url: str,
    selectors: SelectorConfig | None = None,
    timeout_ms: float = 15000,
) -> bool:
    """Sign in if the page asks for it.

    Args:
        page: The Playwright Page object.
        credentials: Account email and password.
        home_url: URL of the platform's home page.
        selectors: Selectors for the sign-in affordances.
        timeout_ms: How long to wait for the signed-in page after submitting.

    Returns:
        True if the sign-in flow ran, False if the session was already signed in.

    Raises:
        NavigationError: If the home page cannot be loaded.
        AuthenticationError: If any sign-in step fails or times out.
    """
    selectors = selectors or SelectorConfig()
    logForDebugging("Navigating to YouTube and attempting login...", level="info")

    result = navigate(page, home_url)
    if not result.success:
        raise NavigationError(f"{result.message}: {result.error}")

    sign_in = page.locator(selectors.sign_in_button).first
    if not sign_in.is_visible():
        logForDebugging("Already logged in or login button not found. Proceeding.", level="info")
        return False

    _require(click(sign_in, "sign-in button"))

    _require(type_(page, selectors.email_input, credentials.email))
    _require(press(page, "Enter"))

    _require(type_(page, selectors.password_input, credentials.password, secret=True))
    _require(press(page, "Enter"))

    try:
        page.wait_for_selector(selectors.signed_in_marker, timeout=timeout_ms)
    except PlaywrightTimeoutError as e:
        raise AuthenticationError(
            f"Signed-in page did not appear within {timeout_ms}ms"
        ) from e

    logEvent("login_succeeded")
    return True
