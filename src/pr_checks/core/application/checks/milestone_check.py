"""Checks on the milestone a pull request is assigned to."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from pr_checks.core.application.checks.base_check import (
    BaseCheck,
    CheckContext,
    severity_for,
    single_outcome,
)
from pr_checks.core.application.exceptions import InvalidCheckConfigError
from pr_checks.core.domain.pull_request import Milestone
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity

DEFAULT_DAYS_BEFORE_DUE = 5
MESSAGE_NO_MILESTONE = "PR is not assigned to a milestone."

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class MilestoneSetCheck(BaseCheck):
    name = "milestone_set"

    def __init__(self, fail_on_error: bool = False) -> None:
        self._severity = severity_for(fail_on_error)

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        if context.pull_request.milestone() is not None:
            return []
        return single_outcome(MESSAGE_NO_MILESTONE, self._severity)


@dataclass(frozen=True)
class MilestoneDueDateConfig:
    days_before_due: int = DEFAULT_DAYS_BEFORE_DUE
    if_no_milestone: ReportSeverity = ReportSeverity.WARNING

    def __post_init__(self) -> None:
        if self.days_before_due < 0:
            raise InvalidCheckConfigError(
                "days_before_due cannot be negative.",
                context={"days_before_due": self.days_before_due},
            )


class MilestoneDueDateCheck(BaseCheck):
    """Warns when the milestone of an open pull request is due soon or overdue."""

    name = "milestone_due_date"

    def __init__(self, config: MilestoneDueDateConfig | None = None, clock: Clock = _utc_now) -> None:
        self._config = config or MilestoneDueDateConfig()
        self._clock = clock

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        milestone = context.pull_request.milestone()
        if milestone is None:
            return single_outcome(MESSAGE_NO_MILESTONE, self._config.if_no_milestone)

        if context.pull_request.state() == "closed" or milestone.due_on is None:
            return []

        time_before_due = _as_utc(milestone.due_on) - self._clock()
        if time_before_due > timedelta(days=self._config.days_before_due):
            return []
        return [CheckOutcome(message=self._message(milestone, time_before_due), severity=ReportSeverity.WARNING)]

    def _message(self, milestone: Milestone, time_before_due: timedelta) -> str:
        text = f"This PR is assigned to the milestone [{milestone.title}]({milestone.url}). "
        if time_before_due > timedelta(0):
            text += f"This milestone is due in less than {self._config.days_before_due} days.\n"
        else:
            text += "The due date for this milestone has already passed.\n"
        return text + (
            "Please make sure to get it merged by then or assign it to a milestone with a later deadline."
        )


def _as_utc(moment: datetime) -> datetime:
    return moment.replace(tzinfo=UTC) if moment.tzinfo is None else moment
