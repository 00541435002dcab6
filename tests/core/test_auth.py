"""Tests for the sign-in flow."""

from unittest.mock import MagicMock, call

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from yt_unsubscribe.core.auth import login
from yt_unsubscribe.core.config import Credentials, SelectorConfig
from yt_unsubscribe.core.errors import AuthenticationError, NavigationError

HOME = "https://www.youtube.com"


@pytest.fixture
def mock_page() -> MagicMock:
    page = MagicMock()
    page.goto.return_value.status = 200
    page.locator.return_value.first.is_visible.return_value = True
    return page


def test_already_signed_in(mock_page: MagicMock, credentials: Credentials) -> None:
    mock_page.locator.return_value.first.is_visible.return_value = False

    assert login(mock_page, credentials, HOME) is False

    mock_page.goto.assert_called_once()
    mock_page.fill.assert_not_called()
    mock_page.keyboard.press.assert_not_called()


def test_full_sign_in(
    mock_page: MagicMock, credentials: Credentials, selectors: SelectorConfig
) -> None:
    assert login(mock_page, credentials, HOME, selectors=selectors, timeout_ms=1000) is True

    mock_page.locator.return_value.first.click.assert_called_once()
    assert mock_page.fill.call_args_list == [
        call(selectors.email_input, credentials.email, timeout=30000),
        call(selectors.password_input, credentials.password, timeout=30000),
    ]
    assert mock_page.keyboard.press.call_args_list == [call("Enter"), call("Enter")]
    mock_page.wait_for_selector.assert_called_with(selectors.signed_in_marker, timeout=1000)


def test_signed_in_marker_timeout(
    mock_page: MagicMock, credentials: Credentials, selectors: SelectorConfig
) -> None:
    def wait_for_selector(selector: str, timeout: float) -> MagicMock:
        if selector == selectors.signed_in_marker:
            raise PlaywrightTimeoutError("Timeout 15000ms exceeded")
        return MagicMock()

    mock_page.wait_for_selector.side_effect = wait_for_selector

    with pytest.raises(AuthenticationError, match="did not appear"):
        login(mock_page, credentials, HOME)


def test_missing_email_field(mock_page: MagicMock, credentials: Credentials) -> None:
    mock_page.wait_for_selector.side_effect = PlaywrightTimeoutError("Timeout")

    with pytest.raises(AuthenticationError, match="Timeout"):
        login(mock_page, credentials, HOME)

    mock_page.keyboard.press.assert_not_called()


def test_password_not_in_error(mock_page: MagicMock, credentials: Credentials) -> None:
    mock_page.fill.side_effect = [None, Exception("fill failed")]

    with pytest.raises(AuthenticationError) as exc_info:
        login(mock_page, credentials, HOME)

    assert credentials.password not in str(exc_info.value)


def test_home_navigation_failure(mock_page: MagicMock, credentials: Credentials) -> None:
    mock_page.goto.side_effect = Exception("net::ERR_NAME_NOT_RESOLVED")

    with pytest.raises(NavigationError, match="ERR_NAME_NOT_RESOLVED"):
        login(mock_page, credentials, HOME)
