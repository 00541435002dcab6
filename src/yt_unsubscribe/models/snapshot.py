"""Snapshot models for the list of actionable subscription controls.

A Snapshot is taken once, before any clicks, and never changes length
afterwards even though the live list shrinks as items are processed.
"""

from typing import Iterator

from playwright.sync_api import ElementHandle
from pydantic import BaseModel, ConfigDict, field_validator


class StaleElementError(Exception):
    """Raised when a snapshot element is no longer attached to the document."""

    def __init__(self, ordinal: int) -> None:
        self.ordinal = ordinal
        super().__init__(
            f"Element #{ordinal} is no longer attached to the document."
        )


class ActionableElement(BaseModel):
    """One list row's primary action control, resolved at snapshot time.

    The label is never cached: the platform rewrites button text
    asynchronously, so every read goes back to the live handle.

    Attributes:
        handle: The Playwright element handle for the control.
        ordinal: 1-based position in the snapshot, used for reporting.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    handle: ElementHandle
    ordinal: int

    @field_validator("ordinal")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        """Validate that ordinals are 1-based."""
        if v < 1:
            raise ValueError(f"must be >= 1, got {v}")
        return v

    def is_attached(self) -> bool:
        """Check whether the underlying node is still in the document."""
        return bool(self.handle.evaluate("el => el.isConnected"))

    def label(self) -> str:
        """Read the current visible label, trimmed.

        Raises:
            StaleElementError: If the node has been removed from the document.
        """
        if not self.is_attached():
            raise StaleElementError(self.ordinal)
        return (self.handle.text_content() or "").strip()


class Snapshot(BaseModel):
    """An ordered, immutable capture of actionable elements."""

    model_config = ConfigDict(frozen=True)

    elements: tuple[ActionableElement, ...] = ()

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[ActionableElement]:  # type: ignore[override]
        return iter(self.elements)

    def __getitem__(self, index: int) -> ActionableElement:
        return self.elements[index]

    @property
    def is_empty(self) -> bool:
        return not self.elements
