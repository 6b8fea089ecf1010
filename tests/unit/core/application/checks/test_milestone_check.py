"""Unit tests: milestone checks with an injected clock."""

from datetime import UTC, datetime

import pytest

from conftest import make_context
from pr_checks.core.application.checks import (
    MilestoneDueDateCheck,
    MilestoneDueDateConfig,
    MilestoneSetCheck,
)
from pr_checks.core.application.exceptions import InvalidCheckConfigError
from pr_checks.core.domain.pull_request import Milestone
from pr_checks.core.domain.quality import ReportSeverity

# ── Fixtures ──

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=UTC)


def _milestone(due_on: datetime | None) -> Milestone:
    return Milestone(title="26.1", url="https://example.com/milestone/7", due_on=due_on)


def _check(**config: object) -> MilestoneDueDateCheck:
    return MilestoneDueDateCheck(MilestoneDueDateConfig(**config), clock=lambda: NOW)


class TestMilestoneSetCheck:
    def test_warns_without_milestone(self, empty_context) -> None:
        outcomes = MilestoneSetCheck().evaluate(empty_context)

        assert [(o.message, o.severity) for o in outcomes] == [
            ("PR is not assigned to a milestone.", ReportSeverity.WARNING)
        ]

    def test_fail_on_error(self, empty_context) -> None:
        assert MilestoneSetCheck(fail_on_error=True).evaluate(empty_context)[0].is_blocking

    def test_silent_with_milestone(self) -> None:
        assert MilestoneSetCheck().evaluate(make_context(milestone=_milestone(None))) == []


class TestMilestoneDueDateCheck:
    def test_due_soon(self) -> None:
        context = make_context(milestone=_milestone(datetime(2026, 1, 12, tzinfo=UTC)))

        outcomes = _check().evaluate(context)

        assert len(outcomes) == 1
        assert outcomes[0].severity == ReportSeverity.WARNING
        assert outcomes[0].message == (
            "This PR is assigned to the milestone [26.1](https://example.com/milestone/7). "
            "This milestone is due in less than 5 days.\n"
            "Please make sure to get it merged by then or assign it to a milestone with a later deadline."
        )

    def test_overdue(self) -> None:
        context = make_context(milestone=_milestone(datetime(2026, 1, 5, tzinfo=UTC)))

        outcomes = _check().evaluate(context)

        assert "The due date for this milestone has already passed." in outcomes[0].message

    def test_far_away_due_date(self) -> None:
        context = make_context(milestone=_milestone(datetime(2026, 2, 1, tzinfo=UTC)))

        assert _check().evaluate(context) == []

    def test_custom_threshold(self) -> None:
        context = make_context(milestone=_milestone(datetime(2026, 1, 25, tzinfo=UTC)))

        outcomes = _check(days_before_due=20).evaluate(context)

        assert "due in less than 20 days" in outcomes[0].message

    def test_naive_due_date_is_read_as_utc(self) -> None:
        context = make_context(milestone=_milestone(datetime(2026, 1, 11)))

        assert len(_check().evaluate(context)) == 1

    def test_closed_pr_and_missing_due_date_are_skipped(self) -> None:
        soon = _milestone(datetime(2026, 1, 11, tzinfo=UTC))

        assert _check().evaluate(make_context(milestone=soon, state="closed")) == []
        assert _check().evaluate(make_context(milestone=_milestone(None))) == []

    def test_no_milestone_uses_configured_severity(self, empty_context) -> None:
        assert _check().evaluate(empty_context)[0].message == "PR is not assigned to a milestone."
        assert _check(if_no_milestone=ReportSeverity.ERROR).evaluate(empty_context)[0].is_blocking
        assert _check(if_no_milestone=ReportSeverity.NONE).evaluate(empty_context) == []

    def test_negative_threshold_is_rejected(self) -> None:
        with pytest.raises(InvalidCheckConfigError):
            MilestoneDueDateConfig(days_before_due=-1)
