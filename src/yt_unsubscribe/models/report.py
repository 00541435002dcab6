"""Run result models.

RunResult holds the aggregate counters for one sequencer pass. It is
mutated only by the sequencer, one item at a time.
"""

from pydantic import BaseModel, ConfigDict

from yt_unsubscribe.models.outcome import ItemOutcome


class ItemReport(BaseModel):
    """Terminal report for a single processed item.

    Attributes:
        ordinal: 1-based position in the snapshot.
        outcome: The classified outcome.
        detail: Human-readable detail (error message for errored items).
    """

    model_config = ConfigDict(frozen=True)

    ordinal: int
    outcome: ItemOutcome
    detail: str = ""


class RunResult(BaseModel):
    """Aggregate counters for one run.

    Attributes:
        total: Number of elements in the snapshot.
        attempted: Items the sequencer evaluated.
        removed: Items whose removal was confirmed.
        skipped: Items whose precondition was not met (already gone).
        warned: Items where a workflow step was missing.
        menu_missing: Subset of warned where the menu item never appeared.
        confirm_missing: Subset of warned where the confirm button never appeared.
        errored: Items that raised during processing.
        items: Per-item reports in processing order.
    """

    total: int = 0
    attempted: int = 0
    removed: int = 0
    skipped: int = 0
    warned: int = 0
    menu_missing: int = 0
    confirm_missing: int = 0
    errored: int = 0
    items: list[ItemReport] = []

    def record(self, report: ItemReport) -> None:
        """Fold one item report into the counters."""
        self.attempted += 1
        self.items.append(report)

        outcome = report.outcome
        if outcome is ItemOutcome.REMOVED:
            self.removed += 1
        elif outcome is ItemOutcome.SKIPPED_ALREADY_GONE:
            self.skipped += 1
        elif outcome is ItemOutcome.SKIPPED_MENU_MISSING:
            self.warned += 1
            self.menu_missing += 1
        elif outcome is ItemOutcome.SKIPPED_CONFIRM_MISSING:
            self.warned += 1
            self.confirm_missing += 1
        elif outcome is ItemOutcome.ERRORED:
            self.errored += 1

    def counters(self) -> dict[str, int]:
        """Return the counters as a plain dict (for logging and display)."""
        return {
            "total": self.total,
            "attempted": self.attempted,
            "removed": self.removed,
            "skipped": self.skipped,
            "warned": self.warned,
            "errored": self.errored,
        }
