"""Tests for logging helpers."""

import logging

import pytest

from yt_unsubscribe.core.logging import (
    LOGGER_NAME,
    ErrorIds,
    logError,
    logEvent,
    logForDebugging,
    set_log_level,
)


def test_log_event_format(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="yt_unsubscribe"):
        logEvent("run_finished", {"removed": 3, "errored": 0})

    assert "[EVENT] run_finished | removed=3, errored=0" in caplog.text


def test_log_error_includes_id(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="yt_unsubscribe"):
        logError(ErrorIds.CLICK_TIMEOUT, "Timeout clicking button", extra={"item": 4})

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "[ERR_CLICK_TIMEOUT] Timeout clicking button | item=4"


def test_log_for_debugging_level(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="yt_unsubscribe"):
        logForDebugging("[2/5] Skipping", level="warning")

    assert caplog.records[-1].levelno == logging.WARNING


def test_set_log_level_only_filters_console() -> None:
    logger = logging.getLogger(LOGGER_NAME)

    set_log_level("warning")
    try:
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.WARNING
    finally:
        set_log_level("info")
