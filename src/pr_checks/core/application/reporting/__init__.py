from pr_checks.core.application.reporting.report_sink import ReportSink

__all__ = ["ReportSink"]
