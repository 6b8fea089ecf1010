from pr_checks.core.domain.quality.check_outcome import CheckOutcome
from pr_checks.core.domain.quality.class_violation import ClassViolation
from pr_checks.core.domain.quality.value_objects.report_severity import ReportSeverity

__all__ = ["CheckOutcome", "ClassViolation", "ReportSeverity"]
