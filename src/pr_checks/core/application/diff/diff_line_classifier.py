"""Pure functions classifying unified-diff lines and rebuilding added/removed source."""

from pr_checks.core.domain.diff import ChangeType

_ADDED_MARKER = "+"
_REMOVED_MARKER = "-"
_NEW_FILE_HEADER = "+++ "
_OLD_FILE_HEADER = "--- "


def classify(line: str) -> ChangeType:
    """Classify one diff line. File headers (``+++ ``/``--- ``) are not changes."""
    if line.startswith(_ADDED_MARKER) and not line.startswith(_NEW_FILE_HEADER):
        return ChangeType.ADDED
    if line.startswith(_REMOVED_MARKER) and not line.startswith(_OLD_FILE_HEADER):
        return ChangeType.REMOVED
    return ChangeType.OTHER


def patch_lines(patch: str) -> list[str]:
    """Split a patch into lines without their terminators."""
    return patch.split("\n") if patch else []


def select_lines(patch: str, change_type: ChangeType) -> list[str]:
    """Lines of ``change_type``, in patch order, with their one-char marker stripped."""
    return [line[1:] for line in patch_lines(patch) if classify(line) == change_type]


def added_lines(patch: str) -> str:
    """Reconstructed added source: every added line, marker stripped, newline-joined."""
    return "\n".join(select_lines(patch, ChangeType.ADDED))


def removed_lines(patch: str) -> str:
    """Reconstructed removed source: every removed line, marker stripped, newline-joined."""
    return "\n".join(select_lines(patch, ChangeType.REMOVED))
