from enum import StrEnum


class ChangeType(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    OTHER = "other"
