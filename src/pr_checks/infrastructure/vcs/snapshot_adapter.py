from posixpath import normpath

import structlog

from pr_checks.core.application.ports import PullRequestPort, VcsPort
from pr_checks.core.domain.diff import FileChangeKind, FileDiff
from pr_checks.core.domain.pull_request import Milestone
from pr_checks.infrastructure.vcs.snapshot_models import PullRequestSnapshot
from pr_checks.infrastructure.vcs.unified_diff_parser import parse_changeset

logger = structlog.get_logger()


class SnapshotPullRequestAdapter(VcsPort, PullRequestPort):
    """Serves both host ports from a captured pull request snapshot."""

    def __init__(self, snapshot: PullRequestSnapshot) -> None:
        self._snapshot = snapshot
        self._changeset = parse_changeset(snapshot.diff)
        self._by_path = {file_diff.path: file_diff for file_diff in self._changeset}
        self._files = {normpath(path): content for path, content in snapshot.files.items()}
        logger.info("Snapshot loaded", files=len(self._changeset), labels=len(snapshot.labels))

    # ── VcsPort ──

    def added_files(self) -> list[str]:
        return self._paths_of(FileChangeKind.NEW)

    def modified_files(self) -> list[str]:
        return self._paths_of(FileChangeKind.MODIFIED)

    def deleted_files(self) -> list[str]:
        return self._paths_of(FileChangeKind.DELETED)

    def diff_for_file(self, path: str) -> FileDiff:
        return self._by_path.get(path) or FileDiff(path=path, patch="")

    def full_changeset_diff(self) -> list[FileDiff]:
        return list(self._changeset)

    def read_file(self, path: str) -> str:
        try:
            return self._files[normpath(path)]
        except KeyError:
            raise FileNotFoundError(path) from None

    # ── PullRequestPort ──

    def labels(self) -> list[str]:
        return list(self._snapshot.labels)

    def body(self) -> str:
        return self._snapshot.body

    def title(self) -> str:
        return self._snapshot.title

    def base_branch(self) -> str:
        return self._snapshot.base_branch

    def state(self) -> str:
        return self._snapshot.state

    def milestone(self) -> Milestone | None:
        if self._snapshot.milestone is None:
            return None
        return self._snapshot.milestone.to_domain()

    def _paths_of(self, kind: FileChangeKind) -> list[str]:
        return [file_diff.path for file_diff in self._changeset if file_diff.change_kind == kind]
