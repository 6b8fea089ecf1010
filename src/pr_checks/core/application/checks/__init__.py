from pr_checks.core.application.checks.added_diff_lines_check import (
    AddedDiffLinesCheck,
    AddedDiffLinesConfig,
)
from pr_checks.core.application.checks.android_strings_check import strings_do_not_refer_resource
from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext
from pr_checks.core.application.checks.labels_check import LabelsCheck, LabelsConfig
from pr_checks.core.application.checks.manifest_lock_check import (
    GEMFILE,
    PODFILE,
    SWIFT_PACKAGE,
    ManifestLockCheck,
    ManifestLockConfig,
)
from pr_checks.core.application.checks.milestone_check import (
    MilestoneDueDateCheck,
    MilestoneDueDateConfig,
    MilestoneSetCheck,
)
from pr_checks.core.application.checks.missing_tests_check import (
    MissingTestsCheck,
    MissingTestsConfig,
)
from pr_checks.core.application.checks.podfile_lock_check import (
    PodfileLockReferencesCheck,
    podfile_branch_references,
    podfile_commit_references,
    podfile_diff_branch_references,
    podfile_diff_commit_references,
)
from pr_checks.core.application.checks.pr_size_check import (
    DiffSizeCheck,
    DiffSizeConfig,
    DiffSizeKind,
    PrBodyCheck,
    PrBodyConfig,
)
from pr_checks.core.application.checks.release_checks import (
    FileChangedConfig,
    ReleaseFileChangedCheck,
    ReleaseNotesStoreStringsCheck,
    android_modified_strings_on_release,
    android_release_notes_and_play_store_strings,
    internal_release_notes_changed,
    ios_core_data_model_changed,
    ios_modified_en_strings_on_regular_branch,
    ios_modified_localizable_strings_on_release,
    ios_modified_translations_on_release_branch,
    ios_release_notes_and_app_store_strings,
)
from pr_checks.core.application.checks.tracks_check import TracksCheck, TracksConfig
from pr_checks.core.application.checks.view_changes_check import ViewChangesNeedScreenshotsCheck

__all__ = [
    "GEMFILE",
    "PODFILE",
    "SWIFT_PACKAGE",
    "AddedDiffLinesCheck",
    "AddedDiffLinesConfig",
    "BaseCheck",
    "CheckContext",
    "DiffSizeCheck",
    "DiffSizeConfig",
    "DiffSizeKind",
    "FileChangedConfig",
    "LabelsCheck",
    "LabelsConfig",
    "ManifestLockCheck",
    "ManifestLockConfig",
    "MilestoneDueDateCheck",
    "MilestoneDueDateConfig",
    "MilestoneSetCheck",
    "MissingTestsCheck",
    "MissingTestsConfig",
    "PodfileLockReferencesCheck",
    "PrBodyCheck",
    "PrBodyConfig",
    "ReleaseFileChangedCheck",
    "ReleaseNotesStoreStringsCheck",
    "TracksCheck",
    "TracksConfig",
    "ViewChangesNeedScreenshotsCheck",
    "android_modified_strings_on_release",
    "android_release_notes_and_play_store_strings",
    "internal_release_notes_changed",
    "ios_core_data_model_changed",
    "ios_modified_en_strings_on_regular_branch",
    "ios_modified_localizable_strings_on_release",
    "ios_modified_translations_on_release_branch",
    "ios_release_notes_and_app_store_strings",
    "podfile_branch_references",
    "podfile_commit_references",
    "podfile_diff_branch_references",
    "podfile_diff_commit_references",
    "strings_do_not_refer_resource",
]
