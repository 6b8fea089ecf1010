from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext, single_outcome
from pr_checks.core.application.diff import DiffStats, all_changed_files, count_changes
from pr_checks.core.application.exceptions import InvalidCheckConfigError
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity

DEFAULT_MAX_DIFF_SIZE = 500
DEFAULT_DIFF_SIZE_MESSAGE_FORMAT = (
    "This PR is larger than {max_size} lines of changes. "
    "Please consider splitting it into smaller PRs for easier and faster reviews."
)
DEFAULT_MIN_PR_BODY = 10
DEFAULT_MIN_PR_BODY_MESSAGE_FORMAT = (
    "The PR description appears very short, less than {min_length} characters long. "
    "Please provide a summary of your changes in the PR description."
)


class DiffSizeKind(StrEnum):
    INSERTIONS = "insertions"
    DELETIONS = "deletions"
    ALL = "all"


@dataclass(frozen=True)
class DiffSizeConfig:
    max_size: int = DEFAULT_MAX_DIFF_SIZE
    counted: DiffSizeKind = DiffSizeKind.ALL
    file_selector: Callable[[str], bool] | None = None
    message: str | None = None
    severity: ReportSeverity = ReportSeverity.WARNING

    def __post_init__(self) -> None:
        if self.max_size < 0:
            raise InvalidCheckConfigError("max_size cannot be negative.", context={"max_size": self.max_size})


class DiffSizeCheck(BaseCheck):
    """Reports when the counted changed lines exceed ``max_size``."""

    name = "diff_size"

    def __init__(self, config: DiffSizeConfig | None = None) -> None:
        self._config = config or DiffSizeConfig()

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        stats = self._diff_stats(context)
        size = {
            DiffSizeKind.INSERTIONS: stats.insertions,
            DiffSizeKind.DELETIONS: stats.deletions,
            DiffSizeKind.ALL: stats.total,
        }[self._config.counted]
        if size <= self._config.max_size:
            return []

        message = self._config.message or DEFAULT_DIFF_SIZE_MESSAGE_FORMAT.format(
            max_size=self._config.max_size
        )
        return single_outcome(message, self._config.severity)

    def _diff_stats(self, context: CheckContext) -> DiffStats:
        files = all_changed_files(context.vcs)
        if self._config.file_selector is not None:
            files = [path for path in files if self._config.file_selector(path)]

        insertions = deletions = 0
        for path in files:
            stats = count_changes(context.vcs.diff_for_file(path).patch)
            insertions += stats.insertions
            deletions += stats.deletions
        return DiffStats(insertions=insertions, deletions=deletions)


@dataclass(frozen=True)
class PrBodyConfig:
    min_length: int = DEFAULT_MIN_PR_BODY
    message: str | None = None
    severity: ReportSeverity = ReportSeverity.WARNING


class PrBodyCheck(BaseCheck):
    name = "pr_body"

    def __init__(self, config: PrBodyConfig | None = None) -> None:
        self._config = config or PrBodyConfig()

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        if len(context.pull_request.body() or "") > self._config.min_length:
            return []

        message = self._config.message or DEFAULT_MIN_PR_BODY_MESSAGE_FORMAT.format(
            min_length=self._config.min_length
        )
        return single_outcome(message, self._config.severity)
