import re
from collections.abc import Sequence
from dataclasses import dataclass

from pr_checks.core.application.checks.base_check import (
    BaseCheck,
    CheckContext,
    markdown_code_list,
)
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity

DEFAULT_DO_NOT_MERGE_LABELS: tuple[str, ...] = ("Do Not Merge",)


@dataclass(frozen=True)
class LabelsConfig:
    do_not_merge_labels: Sequence[str] = DEFAULT_DO_NOT_MERGE_LABELS
    required_labels: Sequence[str | re.Pattern[str]] = ()
    required_labels_error: str | None = None
    recommended_labels: Sequence[str | re.Pattern[str]] = ()
    recommended_labels_warning: str | None = None


class LabelsCheck(BaseCheck):
    """Fails on do-not-merge labels and missing required labels; warns on missing recommended ones."""

    name = "labels"

    def __init__(self, config: LabelsConfig | None = None) -> None:
        self._config = config or LabelsConfig()

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        labels = context.pull_request.labels()
        outcomes: list[CheckOutcome] = []

        blocking = [
            label
            for label in labels
            if any(label.casefold() == dnm.casefold() for dnm in self._config.do_not_merge_labels)
        ]
        if blocking:
            outcomes.append(
                CheckOutcome(
                    message=f"This PR is tagged with {markdown_code_list(blocking)} label(s).",
                    severity=ReportSeverity.ERROR,
                )
            )

        outcomes += _missing_labels(
            labels,
            self._config.required_labels,
            self._config.required_labels_error,
            ReportSeverity.ERROR,
        )
        outcomes += _missing_labels(
            labels,
            self._config.recommended_labels,
            self._config.recommended_labels_warning,
            ReportSeverity.WARNING,
        )
        return outcomes


def _missing_labels(
    labels: list[str],
    expected: Sequence[str | re.Pattern[str]],
    custom_message: str | None,
    severity: ReportSeverity,
) -> list[CheckOutcome]:
    missing = [
        pattern for pattern in expected if not any(re.search(pattern, label) for label in labels)
    ]
    if not missing:
        return []

    sources = [pattern.pattern if isinstance(pattern, re.Pattern) else pattern for pattern in missing]
    message = custom_message or f"PR is missing label(s) matching: {markdown_code_list(sources)}"
    return [CheckOutcome(message=message, severity=severity)]
