from pathlib import PurePosixPath

from pr_checks.core.application.checks.added_diff_lines_check import (
    AddedDiffLinesCheck,
    AddedDiffLinesConfig,
)
from pr_checks.core.domain.quality import ReportSeverity

MESSAGE_STRING_REFERENCE = (
    "This PR adds a translatable entry which references another string resource; "
    "this usually causes issues with translations.\n"
    'Please make sure to set the `translatable="false"` attribute.'
)


def _refers_to_string_resource(line: str) -> bool:
    return "@string/" in line and 'translatable="false"' not in line


def strings_do_not_refer_resource(severity: ReportSeverity = ReportSeverity.WARNING) -> AddedDiffLinesCheck:
    """Flags added ``strings.xml`` entries that reference another string and stay translatable."""
    check = AddedDiffLinesCheck(
        AddedDiffLinesConfig(
            file_selector=lambda path: PurePosixPath(path).name == "strings.xml",
            line_matcher=_refers_to_string_resource,
            message=MESSAGE_STRING_REFERENCE,
            severity=severity,
        )
    )
    check.name = "android_strings_refer_resource"
    return check
