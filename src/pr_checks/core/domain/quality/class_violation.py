from dataclasses import dataclass


@dataclass(frozen=True)
class ClassViolation:
    """A newly added production class with no new test referencing it."""

    class_name: str
    file_path: str
    supertype: str | None = None
