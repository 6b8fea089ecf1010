from enum import StrEnum


class FileChangeKind(StrEnum):
    NEW = "new"
    MODIFIED = "modified"
    DELETED = "deleted"
