from abc import ABC, abstractmethod
from dataclasses import dataclass

from pr_checks.core.application.ports import PullRequestPort, VcsPort
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity


@dataclass(frozen=True)
class CheckContext:
    """Collaborators a check reads its facts from."""

    vcs: VcsPort
    pull_request: PullRequestPort


class BaseCheck(ABC):
    """Common capability of every check: read facts, evaluate, return outcomes.

    Checks never report directly; the runner forwards outcomes to the sink.
    """

    name: str = "check"

    @abstractmethod
    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        """Return the messages to post. An empty list means the check passed silently."""


def single_outcome(message: str, severity: ReportSeverity) -> list[CheckOutcome]:
    if severity == ReportSeverity.NONE:
        return []
    return [CheckOutcome(message=message, severity=severity)]


def severity_for(fail_on_error: bool) -> ReportSeverity:
    return ReportSeverity.ERROR if fail_on_error else ReportSeverity.WARNING


def markdown_code_list(items: list[str]) -> str:
    return ", ".join(f"`{item}`" for item in items)
