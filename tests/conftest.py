"""Shared fixtures: in-memory port fakes and unified-diff builders."""

from collections.abc import Iterable

import pytest

from pr_checks.core.application.checks import CheckContext
from pr_checks.core.application.ports import PullRequestPort, VcsPort
from pr_checks.core.domain.diff import FileChangeKind, FileDiff
from pr_checks.core.domain.pull_request import Milestone


def make_patch(
    path: str,
    added: Iterable[str] = (),
    removed: Iterable[str] = (),
    context: Iterable[str] = (),
) -> str:
    """Build a single-hunk unified diff body for ``path``."""
    added, removed, context = list(added), list(removed), list(context)
    lines = [
        f"--- a/{path}",
        f"+++ b/{path}",
        f"@@ -1,{len(removed) + len(context)} +1,{len(added) + len(context)} @@",
    ]
    lines += [f" {line}" for line in context]
    lines += [f"-{line}" for line in removed]
    lines += [f"+{line}" for line in added]
    return "\n".join(lines)


def make_file_diff(
    path: str,
    added: Iterable[str] = (),
    removed: Iterable[str] = (),
    change_kind: FileChangeKind = FileChangeKind.MODIFIED,
) -> FileDiff:
    return FileDiff(path=path, patch=make_patch(path, added, removed), change_kind=change_kind)


class FakeVcs(VcsPort):
    def __init__(self, changeset: Iterable[FileDiff] = (), files: dict[str, str] | None = None) -> None:
        self._changeset = list(changeset)
        self._files = files or {}

    def added_files(self) -> list[str]:
        return [d.path for d in self._changeset if d.change_kind == FileChangeKind.NEW]

    def modified_files(self) -> list[str]:
        return [d.path for d in self._changeset if d.change_kind == FileChangeKind.MODIFIED]

    def deleted_files(self) -> list[str]:
        return [d.path for d in self._changeset if d.change_kind == FileChangeKind.DELETED]

    def diff_for_file(self, path: str) -> FileDiff:
        for file_diff in self._changeset:
            if file_diff.path == path:
                return file_diff
        return FileDiff(path=path, patch="")

    def full_changeset_diff(self) -> list[FileDiff]:
        return list(self._changeset)

    def read_file(self, path: str) -> str:
        if path not in self._files:
            raise FileNotFoundError(path)
        return self._files[path]


class FakePullRequest(PullRequestPort):
    def __init__(
        self,
        labels: Iterable[str] = (),
        body: str = "",
        title: str = "",
        base_branch: str = "trunk",
        state: str = "open",
        milestone: Milestone | None = None,
    ) -> None:
        self._labels = list(labels)
        self._body = body
        self._title = title
        self._base_branch = base_branch
        self._state = state
        self._milestone = milestone

    def labels(self) -> list[str]:
        return list(self._labels)

    def body(self) -> str:
        return self._body

    def title(self) -> str:
        return self._title

    def base_branch(self) -> str:
        return self._base_branch

    def state(self) -> str:
        return self._state

    def milestone(self) -> Milestone | None:
        return self._milestone


def make_context(
    changeset: Iterable[FileDiff] = (),
    files: dict[str, str] | None = None,
    **pull_request: object,
) -> CheckContext:
    return CheckContext(vcs=FakeVcs(changeset, files), pull_request=FakePullRequest(**pull_request))


@pytest.fixture
def empty_context() -> CheckContext:
    return make_context()
