"""Single-file change inside a pull-request changeset."""

from dataclasses import dataclass

from pr_checks.core.domain.diff.value_objects.file_change_kind import FileChangeKind


@dataclass(frozen=True)
class FileDiff:
    """Unified-diff body for one file, as supplied by the host.

    ``change_kind`` is informational; the diff heuristics only look at
    ``path`` and ``patch``.
    """

    path: str
    patch: str
    change_kind: FileChangeKind = FileChangeKind.MODIFIED

    def __post_init__(self) -> None:
        if not self.path.strip():
            raise ValueError("FileDiff path cannot be empty.")
