from pr_checks.infrastructure.reporting.status_report import StatusReport
from pr_checks.infrastructure.reporting.status_report_formatter import build_status_summary

__all__ = ["StatusReport", "build_status_summary"]
