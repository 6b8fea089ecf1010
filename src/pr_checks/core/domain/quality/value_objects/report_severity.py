from enum import StrEnum


class ReportSeverity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    MESSAGE = "message"
    NONE = "none"
