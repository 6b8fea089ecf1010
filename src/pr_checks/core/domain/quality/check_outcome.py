from dataclasses import dataclass

from pr_checks.core.domain.quality.value_objects.report_severity import ReportSeverity


@dataclass(frozen=True)
class CheckOutcome:
    """One message a check wants posted on the pull request."""

    message: str
    severity: ReportSeverity = ReportSeverity.WARNING

    @property
    def is_blocking(self) -> bool:
        return self.severity == ReportSeverity.ERROR
