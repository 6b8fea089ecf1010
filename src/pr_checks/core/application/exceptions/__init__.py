from pr_checks.core.application.exceptions.check_exceptions import (
    CheckExecutionError,
    ChecksError,
    InvalidCheckConfigError,
)

__all__ = ["CheckExecutionError", "ChecksError", "InvalidCheckConfigError"]
