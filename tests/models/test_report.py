"""Tests for run result models."""

import pytest
from pydantic import ValidationError

from yt_unsubscribe.models.outcome import ItemOutcome
from yt_unsubscribe.models.report import ItemReport, RunResult


class TestRunResult:
    def test_defaults(self) -> None:
        result = RunResult()
        assert result.counters() == {
            "total": 0,
            "attempted": 0,
            "removed": 0,
            "skipped": 0,
            "warned": 0,
            "errored": 0,
        }
        assert result.items == []

    def test_record_each_outcome(self) -> None:
        result = RunResult(total=5)
        for ordinal, outcome in enumerate(ItemOutcome, start=1):
            result.record(ItemReport(ordinal=ordinal, outcome=outcome))

        assert result.attempted == 5
        assert result.removed == 1
        assert result.skipped == 1
        assert result.warned == 2
        assert result.menu_missing == 1
        assert result.confirm_missing == 1
        assert result.errored == 1
        assert [item.ordinal for item in result.items] == [1, 2, 3, 4, 5]

    def test_items_not_shared_between_instances(self) -> None:
        first = RunResult()
        first.record(ItemReport(ordinal=1, outcome=ItemOutcome.REMOVED))
        assert RunResult().items == []


class TestItemReport:
    def test_frozen(self) -> None:
        report = ItemReport(ordinal=1, outcome=ItemOutcome.REMOVED)
        with pytest.raises(ValidationError):
            report.outcome = ItemOutcome.ERRORED  # type: ignore[misc]

    def test_outcome_from_value(self) -> None:
        report = ItemReport(ordinal=2, outcome="skippedMenuMissing")  # type: ignore[arg-type]
        assert report.outcome is ItemOutcome.SKIPPED_MENU_MISSING


def test_warning_outcomes() -> None:
    assert ItemOutcome.SKIPPED_MENU_MISSING.is_warning
    assert ItemOutcome.SKIPPED_CONFIRM_MISSING.is_warning
    assert not ItemOutcome.REMOVED.is_warning
    assert not ItemOutcome.SKIPPED_ALREADY_GONE.is_warning
