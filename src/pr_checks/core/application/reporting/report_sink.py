import structlog

from pr_checks.core.application.ports import ReportPort
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity

logger = structlog.get_logger()


class ReportSink:
    """Routes a message to the host primitive matching its severity."""

    def __init__(self, port: ReportPort) -> None:
        self._port = port

    def report(self, message: str | None, severity: ReportSeverity | None = ReportSeverity.WARNING) -> None:
        if not message or severity is None or severity == ReportSeverity.NONE:
            return

        if severity == ReportSeverity.ERROR:
            self._port.fail(message)
        elif severity == ReportSeverity.WARNING:
            self._port.warn(message)
        elif severity == ReportSeverity.MESSAGE:
            self._port.message(message)
        logger.debug("Reported outcome", severity=str(severity))

    def publish(self, outcome: CheckOutcome) -> None:
        self.report(outcome.message, outcome.severity)
