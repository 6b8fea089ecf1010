from pr_checks.core.application.ports import ReportPort
from pr_checks.infrastructure.reporting.status_report_formatter import build_status_summary


class StatusReport(ReportPort):
    """In-memory host report: collects messages per severity in arrival order."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.messages: list[str] = []

    def fail(self, message: str) -> None:
        self.errors.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def message(self, message: str) -> None:
        self.messages.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_markdown(self) -> str:
        return build_status_summary(self.errors, self.warnings, self.messages)
