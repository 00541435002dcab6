"""Action result models for page interactions.

This module defines the ActionResult type which represents
the result of executing a single page-adapter action.

The union type keeps invalid states unrepresentable:
- SuccessResult: always has message, never has error
- FailureResult: always has message and error
"""

from typing import Union

from pydantic import BaseModel, ConfigDict


class SuccessResult(BaseModel):
    """Result of a successful action execution.

    Attributes:
        message: Human-readable message describing the result.
    """

    model_config = ConfigDict(frozen=True)

    message: str

    @property
    def success(self) -> bool:
        """Always True for SuccessResult."""
        return True

    @property
    def error(self) -> None:
        """Always None for SuccessResult."""
        return None


class FailureResult(BaseModel):
    """Result of a failed action execution.

    Attributes:
        message: Human-readable message describing the result.
        error: Error message describing the failure.
        timed_out: True when the failure was a Playwright timeout.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    error: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        """Always False for FailureResult."""
        return False


# Union type for action results
ActionResult = Union[SuccessResult, FailureResult]


def success_result(message: str) -> ActionResult:
    """Create a successful action result."""
    return SuccessResult(message=message)


def failure_result(message: str, error: str | None = None, timed_out: bool = False) -> ActionResult:
    """Create a failed action result.

    Args:
        message: Human-readable message describing the result.
        error: Error message if the action failed (defaults to message).
        timed_out: Whether the underlying failure was a timeout.

    Returns:
        A FailureResult instance.
    """
    return FailureResult(message=message, error=error or message, timed_out=timed_out)
