"""Release-process checks, generic and with Android / iOS presets."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PurePosixPath

from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext, single_outcome
from pr_checks.core.application.diff import all_changed_files
from pr_checks.core.application.services.branch_rules import is_release_branch
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity

DEFAULT_INTERNAL_RELEASE_NOTES = "RELEASE-NOTES.txt"

MESSAGE_STORE_FILE_NOT_CHANGED = (
    "The `{po_file}` file should be updated if the editorialized release notes file "
    "`{release_notes_file}` is being changed."
)
MESSAGE_INTERNAL_RELEASE_NOTES_CHANGED = (
    "This PR contains changes to `{release_notes_file}`.\n"
    "Note that these changes won't affect the final version of the release notes as this version is in code freeze.\n"
    "Please, get in touch with a release manager if you want to update the final release notes.\n"
)

ANDROID_STRINGS_FILE = "strings.xml"
MESSAGE_ANDROID_STRINGS_FILE_UPDATED = (
    f"`{ANDROID_STRINGS_FILE}` files should only be updated on release branches, "
    "when the translations are downloaded by our automation."
)

IOS_LOCALIZABLE_STRINGS_FILE = "Localizable.strings"
IOS_BASE_STRINGS_FILE = f"en.lproj/{IOS_LOCALIZABLE_STRINGS_FILE}"
MESSAGE_IOS_STRINGS_FILE_UPDATED = (
    f"The `{IOS_LOCALIZABLE_STRINGS_FILE}` files should only be updated on release branches, "
    "when the translations are downloaded by our automation."
)
MESSAGE_IOS_BASE_STRINGS_FILE_UPDATED = (
    f"The `{IOS_BASE_STRINGS_FILE}` file should only be updated before creating a release branch."
)
MESSAGE_IOS_TRANSLATION_FILE_UPDATED = (
    f"Translation files `*.lproj/{IOS_LOCALIZABLE_STRINGS_FILE}` should only be updated on a release branch."
)
MESSAGE_CORE_DATA_UPDATED = (
    "Do not edit an existing Core Data model in a release branch unless it hasn't been released to testers yet. "
    "Instead create a new model version and merge back to develop soon."
)


@dataclass(frozen=True)
class FileChangedConfig:
    file_comparison: Callable[[str], bool]
    message: str
    on_release_branch: bool
    severity: ReportSeverity = ReportSeverity.WARNING


class ReleaseFileChangedCheck(BaseCheck):
    """Reports when a matching file changed and the base branch kind equals ``on_release_branch``."""

    name = "release_file_changed"

    def __init__(self, config: FileChangedConfig) -> None:
        self._config = config

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        if self._config.on_release_branch != is_release_branch(context.pull_request):
            return []
        if not any(self._config.file_comparison(path) for path in all_changed_files(context.vcs)):
            return []
        return single_outcome(self._config.message, self._config.severity)


class ReleaseNotesStoreStringsCheck(BaseCheck):
    """Posts a message when the release notes change without the store strings file."""

    name = "release_notes_store_strings"

    def __init__(self, release_notes_file: str, po_file: str) -> None:
        self._release_notes_file = release_notes_file
        self._po_file = po_file

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        modified = context.vcs.modified_files()
        if self._release_notes_file not in modified or self._po_file in modified:
            return []
        message = MESSAGE_STORE_FILE_NOT_CHANGED.format(
            po_file=self._po_file, release_notes_file=self._release_notes_file
        )
        return [CheckOutcome(message=message, severity=ReportSeverity.MESSAGE)]


def internal_release_notes_changed(
    release_notes_file: str = DEFAULT_INTERNAL_RELEASE_NOTES,
    severity: ReportSeverity = ReportSeverity.WARNING,
) -> ReleaseFileChangedCheck:
    return ReleaseFileChangedCheck(
        FileChangedConfig(
            file_comparison=lambda path: path == release_notes_file,
            message=MESSAGE_INTERNAL_RELEASE_NOTES_CHANGED.format(release_notes_file=release_notes_file),
            on_release_branch=True,
            severity=severity,
        )
    )


# ── Android presets ──


def android_release_notes_and_play_store_strings() -> ReleaseNotesStoreStringsCheck:
    return ReleaseNotesStoreStringsCheck(
        release_notes_file="metadata/release_notes.txt",
        po_file="metadata/PlayStoreStrings.po",
    )


def android_modified_strings_on_release(
    severity: ReportSeverity = ReportSeverity.WARNING,
) -> ReleaseFileChangedCheck:
    return ReleaseFileChangedCheck(
        FileChangedConfig(
            file_comparison=lambda path: PurePosixPath(path).name == ANDROID_STRINGS_FILE,
            message=MESSAGE_ANDROID_STRINGS_FILE_UPDATED,
            on_release_branch=False,
            severity=severity,
        )
    )


# ── iOS presets ──


def is_ios_base_strings_file(path: str) -> bool:
    base_parts = PurePosixPath(IOS_BASE_STRINGS_FILE).parts
    return PurePosixPath(path).parts[-len(base_parts) :] == base_parts


def ios_core_data_model_changed(severity: ReportSeverity = ReportSeverity.WARNING) -> ReleaseFileChangedCheck:
    return ReleaseFileChangedCheck(
        FileChangedConfig(
            file_comparison=lambda path: PurePosixPath(path).suffix == ".xcdatamodeld",
            message=MESSAGE_CORE_DATA_UPDATED,
            on_release_branch=True,
            severity=severity,
        )
    )


def ios_modified_localizable_strings_on_release(
    severity: ReportSeverity = ReportSeverity.WARNING,
) -> ReleaseFileChangedCheck:
    return ReleaseFileChangedCheck(
        FileChangedConfig(
            file_comparison=lambda path: PurePosixPath(path).name == IOS_LOCALIZABLE_STRINGS_FILE,
            message=MESSAGE_IOS_STRINGS_FILE_UPDATED,
            on_release_branch=False,
            severity=severity,
        )
    )


def ios_modified_en_strings_on_regular_branch(
    severity: ReportSeverity = ReportSeverity.WARNING,
) -> ReleaseFileChangedCheck:
    return ReleaseFileChangedCheck(
        FileChangedConfig(
            file_comparison=is_ios_base_strings_file,
            message=MESSAGE_IOS_BASE_STRINGS_FILE_UPDATED,
            on_release_branch=True,
            severity=severity,
        )
    )


def ios_modified_translations_on_release_branch(
    severity: ReportSeverity = ReportSeverity.WARNING,
) -> ReleaseFileChangedCheck:
    return ReleaseFileChangedCheck(
        FileChangedConfig(
            file_comparison=lambda path: (
                not is_ios_base_strings_file(path)
                and PurePosixPath(path).name == IOS_LOCALIZABLE_STRINGS_FILE
            ),
            message=MESSAGE_IOS_TRANSLATION_FILE_UPDATED,
            on_release_branch=False,
            severity=severity,
        )
    )


def ios_release_notes_and_app_store_strings() -> ReleaseNotesStoreStringsCheck:
    return ReleaseNotesStoreStringsCheck(
        release_notes_file="Resources/release_notes.txt",
        po_file="Resources/AppStoreStrings.po",
    )
