"""Pure functions for splitting a multi-file ``git diff`` into domain FileDiffs."""

import re

import structlog

from pr_checks.core.domain.diff import FileChangeKind, FileDiff

logger = structlog.get_logger()

_FILE_HEADER_RE = re.compile(r"^diff --git a/(?P<old>\S+) b/(?P<new>\S+)$", re.MULTILINE)
_NEW_FILE_RE = re.compile(r"^new file mode ", re.MULTILINE)
_DELETED_FILE_RE = re.compile(r"^deleted file mode ", re.MULTILINE)
_FIRST_HUNK_RE = re.compile(r"^@@ ", re.MULTILINE)


def parse_changeset(raw_diff: str) -> list[FileDiff]:
    """Split ``raw_diff`` on its ``diff --git`` headers, keeping each file's full text as the patch."""
    headers = list(_FILE_HEADER_RE.finditer(raw_diff or ""))
    changeset: list[FileDiff] = []
    for index, header in enumerate(headers):
        end = headers[index + 1].start() if index + 1 < len(headers) else len(raw_diff)
        block = raw_diff[header.start() : end].rstrip("\n")
        changeset.append(
            FileDiff(path=header.group("new"), patch=block, change_kind=_change_kind(block))
        )
    logger.debug("Parsed changeset", files=len(changeset))
    return changeset


def _change_kind(block: str) -> FileChangeKind:
    """Read the extended header lines, which precede the first hunk."""
    hunk = _FIRST_HUNK_RE.search(block)
    header = block[: hunk.start()] if hunk else block
    if _NEW_FILE_RE.search(header):
        return FileChangeKind.NEW
    if _DELETED_FILE_RE.search(header):
        return FileChangeKind.DELETED
    return FileChangeKind.MODIFIED
