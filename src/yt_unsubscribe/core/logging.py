"""Logging infrastructure for the unsubscribe run.

This module provides structured logging for errors, per-item progress,
and run events. All logging functions use the standard library logging
module under the "yt_unsubscribe" logger.
"""

import logging
import sys
from typing import Any


class ErrorIds:
    """Constants for error IDs used in logging."""

    # Per-item errors
    STALE_ELEMENT_REFERENCE = "ERR_STALE_ELEMENT"
    CLICK_TIMEOUT = "ERR_CLICK_TIMEOUT"
    ELEMENT_INTERACTION_FAILED = "ERR_ELEMENT_INTERACT"
    MENU_ITEM_MISSING = "ERR_MENU_ITEM_MISSING"
    CONFIRM_BUTTON_MISSING = "ERR_CONFIRM_MISSING"

    # Session errors
    NAVIGATION_FAILED = "ERR_NAVIGATE"
    AUTHENTICATION_FAILED = "ERR_AUTH_FAILED"
    MISSING_CREDENTIALS = "ERR_MISSING_CREDENTIALS"
    LOAD_TIMEOUT = "ERR_LOAD_TIMEOUT"

    # General errors
    UNEXPECTED_ERROR = "ERR_UNEXPECTED"
    KEYBOARD_INTERRUPT = "KEYBOARD_INTERRUPT"


LOGGER_NAME = "yt_unsubscribe"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger: logging.Logger | None = None


def _get_logger() -> logging.Logger:
    """Get or create the logger instance."""
    global _logger
    if _logger is None:
        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(logging.DEBUG)

        # Console handler for user-facing logs
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        _logger.addHandler(console_handler)

    return _logger


def _format_pairs(pairs: dict[str, Any]) -> str:
    return ", ".join(f"{k}={v}" for k, v in pairs.items())


def logError(
    error_id: str,
    message: str,
    exc_info: bool = False,
    extra: dict[str, Any] | None = None,
) -> None:
    """Log an error with its error ID.

    Args:
        error_id: The error ID constant from ErrorIds.
        message: Human-readable error message.
        exc_info: If True, include exception info in the log.
        extra: Optional additional context as key-value pairs.
    """
    log_msg = f"[{error_id}] {message}"
    if extra:
        log_msg += f" | {_format_pairs(extra)}"

    _get_logger().error(log_msg, exc_info=exc_info)


def logForDebugging(
    message: str,
    level: str = "debug",
    extra: dict[str, Any] | None = None,
) -> None:
    """Log a user-facing message at the given level.

    Args:
        message: The message to log.
        level: Log level - "debug", "info", "warning", or "error".
        extra: Optional additional context as key-value pairs.
    """
    log_msg = message
    if extra:
        log_msg += f" | {_format_pairs(extra)}"

    log_level = getattr(logging, level.upper(), logging.DEBUG)
    _get_logger().log(log_level, log_msg)


def logEvent(
    event_name: str,
    properties: dict[str, Any] | None = None,
) -> None:
    """Log a run milestone.

    Events emitted: "snapshot_collected", "list_loaded", "login_succeeded",
    "item_processed" and "run_finished".

    Args:
        event_name: The name of the event.
        properties: Optional event properties as key-value pairs.
    """
    log_msg = f"[EVENT] {event_name}"
    if properties:
        log_msg += f" | {_format_pairs(properties)}"

    _get_logger().info(log_msg)


def set_log_level(level: str | int) -> None:
    """Set the console logging level.

    The logger itself stays at DEBUG so file handlers still receive
    debug records.

    Args:
        level: Log level as string ("debug", "info", "warning", "error")
               or int (logging.DEBUG, logging.INFO, etc.).
    """
    logger = _get_logger()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(logging.DEBUG)
    logger.handlers[0].setLevel(level)


def enable_file_logging(filepath: str) -> None:
    """Enable file logging to a specific file.

    Args:
        filepath: Path to the log file.
    """
    file_handler = logging.FileHandler(filepath, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    _get_logger().addHandler(file_handler)
