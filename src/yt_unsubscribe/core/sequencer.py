"""Unsubscribe sequencer.

Drives each snapshot element through the three-click confirmation
workflow:

    START      read the live label; anything but "Subscribed" is skipped
    VERIFIED   click the subscription button to open its menu
    MENU_OPEN  click the "Unsubscribe" menu item
    CONFIRMED  click the dialog's confirm button
    DONE

Every item ends with exactly one ItemOutcome, which selects the wait
applied before the next item. Exceptions are caught at the item
boundary, so one failing row never aborts the run.
"""

import re
from typing import NamedTuple

from playwright.sync_api import ElementHandle, Locator, Page

from yt_unsubscribe.core.config import SelectorConfig
from yt_unsubscribe.core.logging import ErrorIds, logError, logEvent, logForDebugging
from yt_unsubscribe.core.pacer import Duration, Pacer
from yt_unsubscribe.models.outcome import ItemOutcome, ItemState
from yt_unsubscribe.models.report import ItemReport, RunResult
from yt_unsubscribe.models.result import ActionResult
from yt_unsubscribe.models.snapshot import ActionableElement, Snapshot, StaleElementError
from yt_unsubscribe.tools.actions import click

# Wait applied after an item finishes, keyed by its outcome
_WAIT_POLICY: dict[ItemOutcome, tuple[Duration, int] | None] = {
    ItemOutcome.REMOVED: (Duration.LONG, 1),
    ItemOutcome.SKIPPED_ALREADY_GONE: None,
    ItemOutcome.SKIPPED_MENU_MISSING: (Duration.SHORT, 3),
    ItemOutcome.SKIPPED_CONFIRM_MISSING: (Duration.LONG, 1),
    ItemOutcome.ERRORED: (Duration.LONG, 1),
}


class _Transition(NamedTuple):
    """Next state; an outcome is set exactly when state is DONE."""

    state: ItemState
    outcome: ItemOutcome | None = None
    detail: str = ""


class ItemActionFailed(Exception):
    """Raised inside the state machine when a required click fails."""

    def __init__(self, result: ActionResult) -> None:
        self.result = result
        self.error_id = (
            ErrorIds.CLICK_TIMEOUT
            if getattr(result, "timed_out", False)
            else ErrorIds.ELEMENT_INTERACTION_FAILED
        )
        super().__init__(f"{result.message}: {result.error}")


class UnsubscribeSequencer:
    """Processes a snapshot one element at a time."""

    def __init__(
        self,
        page: Page,
        pacer: Pacer,
        selectors: SelectorConfig | None = None,
        click_timeout_ms: float | None = None,
    ) -> None:
        self._page = page
        self._pacer = pacer
        self._selectors = selectors or SelectorConfig()
        self._click_timeout = (
            click_timeout_ms if click_timeout_ms is not None else pacer.config.click_timeout_ms
        )
        self._expected_label = self._selectors.subscribed_label.strip().lower()
        self._menu_text = re.compile(re.escape(self._selectors.unsubscribe_text), re.IGNORECASE)

    def run(self, snapshot: Snapshot) -> RunResult:
        """Process every element of the snapshot in order.

        Args:
            snapshot: The elements to process. Its length fixes the
                      number of items, regardless of outcomes.

        Returns:
            RunResult with the final counters.
        """
        total = len(snapshot)
        result = RunResult(total=total)
        logForDebugging(f"Found {total} total channels to process.", level="info")

        for element in snapshot:
            report = self.process(element)
            result.record(report)
            self._log_report(report, total)
            self._settle(report.outcome)

        logEvent("run_finished", result.counters())
        return result

    def process(self, element: ActionableElement) -> ItemReport:
        """Run one element through the state machine to DONE.

        Never raises: any exception becomes an ERRORED report.
        """
        transition = _Transition(ItemState.START)
        try:
            while transition.outcome is None:
                transition = self._advance(transition.state, element)
        except ItemActionFailed as e:
            logError(e.error_id, e.result.message, extra={"item": element.ordinal})
            return ItemReport(ordinal=element.ordinal, outcome=ItemOutcome.ERRORED, detail=str(e))
        except Exception as e:
            logError(
                ErrorIds.UNEXPECTED_ERROR,
                f"An error occurred while processing subscription {element.ordinal}",
                extra={"error": e},
            )
            return ItemReport(ordinal=element.ordinal, outcome=ItemOutcome.ERRORED, detail=str(e))

        return ItemReport(
            ordinal=element.ordinal,
            outcome=transition.outcome,
            detail=transition.detail,
        )

    def _advance(self, state: ItemState, element: ActionableElement) -> _Transition:
        """Perform the work of one state and return the next transition."""
        if state is ItemState.START:
            try:
                label = element.label()
            except StaleElementError as e:
                return _Transition(ItemState.DONE, ItemOutcome.SKIPPED_ALREADY_GONE, str(e))
            if label.lower() != self._expected_label:
                return _Transition(
                    ItemState.DONE,
                    ItemOutcome.SKIPPED_ALREADY_GONE,
                    f"button text is {label!r}",
                )
            return _Transition(ItemState.VERIFIED)

        if state is ItemState.VERIFIED:
            self._click(element.handle, f"subscription button #{element.ordinal}")
            self._pacer.wait(Duration.SHORT)
            return _Transition(ItemState.MENU_OPEN)

        if state is ItemState.MENU_OPEN:
            menu_item = self._menu_item()
            if not menu_item.is_visible():
                return _Transition(
                    ItemState.DONE,
                    ItemOutcome.SKIPPED_MENU_MISSING,
                    "did not find the 'Unsubscribe' menu item",
                )
            self._click(menu_item, "'Unsubscribe' menu item")
            self._pacer.wait(Duration.SHORT)
            return _Transition(ItemState.CONFIRMED)

        if state is ItemState.CONFIRMED:
            confirm_button = self._page.locator(self._selectors.confirm_button).first
            if not confirm_button.is_visible():
                return _Transition(
                    ItemState.DONE,
                    ItemOutcome.SKIPPED_CONFIRM_MISSING,
                    "confirmation button not found",
                )
            self._click(confirm_button, "confirmation button")
            return _Transition(ItemState.DONE, ItemOutcome.REMOVED)

        raise ValueError(f"No transition out of state {state.value}")

    def _menu_item(self) -> Locator:
        return self._page.locator(self._selectors.menu_item, has_text=self._menu_text).first

    def _click(self, target: Locator | ElementHandle, description: str) -> None:
        result = click(target, description, timeout=self._click_timeout)
        if not result.success:
            raise ItemActionFailed(result)

    def _settle(self, outcome: ItemOutcome) -> None:
        policy = _WAIT_POLICY[outcome]
        if policy is None:
            return
        duration, times = policy
        self._pacer.wait(duration, times=times)

    def _log_report(self, report: ItemReport, total: int) -> None:
        prefix = f"[{report.ordinal}/{total}]"
        outcome = report.outcome
        if outcome is ItemOutcome.REMOVED:
            logForDebugging(f"{prefix} Confirmed final unsubscription.", level="info")
        elif outcome is ItemOutcome.SKIPPED_ALREADY_GONE:
            logForDebugging(
                f"{prefix} Skipping: Already unsubscribed or button text is unexpected.",
                level="info",
                extra={"detail": report.detail},
            )
        elif outcome is ItemOutcome.SKIPPED_MENU_MISSING:
            logForDebugging(
                f"{prefix} Warning: Did not find the 'Unsubscribe' menu item. Skipping.",
                level="warning",
                extra={"error_id": ErrorIds.MENU_ITEM_MISSING},
            )
        elif outcome is ItemOutcome.SKIPPED_CONFIRM_MISSING:
            logForDebugging(
                f"{prefix} WARNING: Confirmation button not found! Skipping.",
                level="warning",
                extra={"error_id": ErrorIds.CONFIRM_BUTTON_MISSING},
            )
        else:
            logForDebugging(f"{prefix} Failed: {report.detail}", level="warning")

        logEvent("item_processed", {"item": report.ordinal, "outcome": outcome.value})
