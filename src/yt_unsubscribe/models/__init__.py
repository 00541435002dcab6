"""Data models for bulk unsubscribe runs."""

from yt_unsubscribe.models.outcome import ItemOutcome, ItemState
from yt_unsubscribe.models.report import ItemReport, RunResult
from yt_unsubscribe.models.result import (
    ActionResult,
    FailureResult,
    SuccessResult,
    failure_result,
    success_result,
)
from yt_unsubscribe.models.snapshot import ActionableElement, Snapshot, StaleElementError

__all__ = [
    "ActionResult",
    "ActionableElement",
    "FailureResult",
    "ItemOutcome",
    "ItemReport",
    "ItemState",
    "RunResult",
    "Snapshot",
    "StaleElementError",
    "SuccessResult",
    "failure_result",
    "success_result",
]
