from collections.abc import Callable
from dataclasses import dataclass

from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext
from pr_checks.core.application.diff import added_and_modified_files, classify, patch_lines
from pr_checks.core.domain.diff import ChangeType
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity

FileSelector = Callable[[str], bool]
LineMatcher = Callable[[str], bool]


@dataclass(frozen=True)
class AddedDiffLinesConfig:
    file_selector: FileSelector
    line_matcher: LineMatcher
    message: str
    severity: ReportSeverity = ReportSeverity.WARNING


class AddedDiffLinesCheck(BaseCheck):
    """One outcome per added diff line matching ``line_matcher`` in the selected files."""

    name = "added_diff_lines"

    def __init__(self, config: AddedDiffLinesConfig) -> None:
        self._config = config

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        if self._config.severity == ReportSeverity.NONE:
            return []

        outcomes: list[CheckOutcome] = []
        for path in filter(self._config.file_selector, added_and_modified_files(context.vcs)):
            for line in patch_lines(context.vcs.diff_for_file(path).patch):
                if classify(line) != ChangeType.ADDED or not self._config.line_matcher(line):
                    continue
                outcomes.append(
                    CheckOutcome(message=self._format(path, line), severity=self._config.severity)
                )
        return outcomes

    def _format(self, path: str, line: str) -> str:
        return f"{self._config.message}\nFile `{path}`:\n```diff\n{line.rstrip()}\n```\n"
