"""Per-item states and outcomes for the unsubscribe sequencer."""

from enum import Enum


class ItemState(str, Enum):
    """States an item moves through during the confirmation workflow.

    START -> VERIFIED -> MENU_OPEN -> CONFIRMED -> DONE, with any state
    allowed to jump straight to DONE once an outcome is known.
    """

    START = "START"
    VERIFIED = "VERIFIED"
    MENU_OPEN = "MENU_OPEN"
    CONFIRMED = "CONFIRMED"
    DONE = "DONE"


class ItemOutcome(str, Enum):
    """Terminal classification of one processed item."""

    REMOVED = "removed"
    SKIPPED_ALREADY_GONE = "skippedAlreadyGone"
    SKIPPED_MENU_MISSING = "skippedMenuMissing"
    SKIPPED_CONFIRM_MISSING = "skippedConfirmMissing"
    ERRORED = "errored"

    @property
    def is_warning(self) -> bool:
        """True for outcomes where an expected workflow step never appeared."""
        return self in (ItemOutcome.SKIPPED_MENU_MISSING, ItemOutcome.SKIPPED_CONFIRM_MISSING)
