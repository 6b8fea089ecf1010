"""Helpers answering common questions about the changed files of a pull request."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pr_checks.core.application.diff.diff_line_classifier import classify, patch_lines
from pr_checks.core.application.ports import VcsPort
from pr_checks.core.domain.diff import ChangeType

LineMatcher = Callable[[str], bool]


@dataclass(frozen=True)
class DiffStats:
    insertions: int = 0
    deletions: int = 0

    @property
    def total(self) -> int:
        return self.insertions + self.deletions


def added_and_modified_files(vcs: VcsPort) -> list[str]:
    return vcs.added_files() + vcs.modified_files()


def all_changed_files(vcs: VcsPort) -> list[str]:
    return vcs.added_files() + vcs.modified_files() + vcs.deleted_files()


def count_changes(patch: str) -> DiffStats:
    insertions = deletions = 0
    for line in patch_lines(patch):
        change = classify(line)
        if change == ChangeType.ADDED:
            insertions += 1
        elif change == ChangeType.REMOVED:
            deletions += 1
    return DiffStats(insertions=insertions, deletions=deletions)


def matching_lines_in_diff_files(
    vcs: VcsPort,
    files: Iterable[str],
    line_matcher: LineMatcher,
    change_type: ChangeType | None = ChangeType.ADDED,
) -> list[str]:
    """Raw diff lines (marker included) of ``files`` accepted by ``line_matcher``.

    ``change_type=None`` accepts both added and removed lines.
    """
    wanted = (ChangeType.ADDED, ChangeType.REMOVED) if change_type is None else (change_type,)
    matched: list[str] = []
    for path in files:
        for line in patch_lines(vcs.diff_for_file(path).patch):
            if classify(line) in wanted and line_matcher(line):
                matched.append(line)
    return matched
