"""Tests for page actions."""

from unittest.mock import MagicMock

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from yt_unsubscribe.tools.actions import click, navigate, press, scroll_to_bottom, type_


@pytest.fixture
def mock_page() -> MagicMock:
    """Create a mock Playwright Page object."""
    page = MagicMock()
    page.url = "https://www.youtube.com"
    return page


@pytest.fixture
def mock_locator() -> MagicMock:
    return MagicMock()


def test_click_success(mock_locator: MagicMock) -> None:
    result = click(mock_locator, "menu item", timeout=5000)

    assert result.success is True
    assert "clicked menu item" in result.message.lower()
    mock_locator.click.assert_called_once_with(timeout=5000)


def test_click_timeout(mock_locator: MagicMock) -> None:
    mock_locator.click.side_effect = PlaywrightTimeoutError("Timeout 5000ms exceeded")

    result = click(mock_locator, "menu item")

    assert result.success is False
    assert result.timed_out is True  # type: ignore[union-attr]
    assert "timeout" in result.error.lower()  # type: ignore[union-attr]


def test_click_detached(mock_locator: MagicMock) -> None:
    mock_locator.click.side_effect = Exception("Element is not attached to the DOM")

    result = click(mock_locator, "subscription button #3")

    assert result.success is False
    assert result.timed_out is False  # type: ignore[union-attr]
    assert "#3" in result.message


def test_press_success(mock_page: MagicMock) -> None:
    result = press(mock_page, "Enter")

    assert result.success is True
    mock_page.keyboard.press.assert_called_once_with("Enter")


def test_press_failure(mock_page: MagicMock) -> None:
    mock_page.keyboard.press.side_effect = Exception("Target closed")

    result = press(mock_page, "Enter")

    assert result.success is False
    assert result.error == "Target closed"


def test_type_success(mock_page: MagicMock) -> None:
    result = type_(mock_page, "input[type=email]", "me@example.com", timeout=1000)

    assert result.success is True
    mock_page.wait_for_selector.assert_called_once_with("input[type=email]", timeout=1000)
    mock_page.fill.assert_called_once_with("input[type=email]", "me@example.com", timeout=1000)


def test_type_secret_not_echoed(mock_page: MagicMock) -> None:
    result = type_(mock_page, "input[type=password]", "hunter2", secret=True)

    assert result.success is True
    assert "hunter2" not in result.message


def test_type_timeout(mock_page: MagicMock) -> None:
    mock_page.wait_for_selector.side_effect = PlaywrightTimeoutError("Timeout")

    result = type_(mock_page, "input[type=email]", "me@example.com")

    assert result.success is False
    assert result.timed_out is True  # type: ignore[union-attr]
    mock_page.fill.assert_not_called()


def test_navigate_success(mock_page: MagicMock) -> None:
    mock_page.goto.return_value.status = 200

    result = navigate(mock_page, "https://www.youtube.com/feed/channels", wait_until="domcontentloaded")

    assert result.success is True
    assert "200" in result.message
    mock_page.goto.assert_called_once_with(
        "https://www.youtube.com/feed/channels", wait_until="domcontentloaded", timeout=30000
    )


def test_navigate_redirect(mock_page: MagicMock) -> None:
    mock_page.goto.return_value.status = 301

    assert navigate(mock_page, "https://www.youtube.com").success is True


def test_navigate_no_response(mock_page: MagicMock) -> None:
    mock_page.goto.return_value = None

    assert navigate(mock_page, "https://www.youtube.com").success is True


def test_navigate_error_status(mock_page: MagicMock) -> None:
    mock_page.goto.return_value.status = 404

    result = navigate(mock_page, "https://www.youtube.com")

    assert result.success is False
    assert result.error == "HTTP 404"


def test_navigate_timeout(mock_page: MagicMock) -> None:
    mock_page.goto.side_effect = PlaywrightTimeoutError("Timeout")

    result = navigate(mock_page, "https://www.youtube.com")

    assert result.success is False
    assert result.timed_out is True  # type: ignore[union-attr]


def test_scroll_to_bottom_returns_count(mock_page: MagicMock) -> None:
    mock_page.evaluate.return_value = 42

    count = scroll_to_bottom(mock_page, "ytd-channel-renderer")

    assert count == 42
    script, selector = mock_page.evaluate.call_args.args
    assert "window.scrollTo" in script
    assert selector == "ytd-channel-renderer"
