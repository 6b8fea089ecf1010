"""Exception hierarchy for the check layer.

Heuristic non-matches are never exceptions; these cover a check that could
not run at all or was configured with values it cannot honour.
"""

from typing import Any


class ChecksError(Exception):
    """Base exception for all application-layer errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class CheckExecutionError(ChecksError):
    """Raised by the runner when a check fails unexpectedly; fails the whole review run."""


class InvalidCheckConfigError(ChecksError, ValueError):
    """Raised when a check configuration value is rejected at construction time."""
