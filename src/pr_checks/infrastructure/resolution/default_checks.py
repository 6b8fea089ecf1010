"""Factories assembling the standard check suites from settings."""

from enum import StrEnum

from pr_checks.core.application.checks import (
    GEMFILE,
    PODFILE,
    BaseCheck,
    DiffSizeCheck,
    DiffSizeConfig,
    LabelsCheck,
    LabelsConfig,
    ManifestLockCheck,
    MilestoneDueDateCheck,
    MilestoneDueDateConfig,
    MissingTestsCheck,
    MissingTestsConfig,
    PrBodyCheck,
    PrBodyConfig,
    ViewChangesNeedScreenshotsCheck,
    android_modified_strings_on_release,
    android_release_notes_and_play_store_strings,
    internal_release_notes_changed,
    ios_core_data_model_changed,
    ios_modified_en_strings_on_regular_branch,
    ios_modified_localizable_strings_on_release,
    ios_modified_translations_on_release_branch,
    ios_release_notes_and_app_store_strings,
    podfile_branch_references,
    podfile_commit_references,
    strings_do_not_refer_resource,
)
from pr_checks.core.application.diff import ANDROID_TEST_FILE_RULES, DEFAULT_TEST_FILE_RULES
from pr_checks.infrastructure.configuration import ChecksSettings


class Platform(StrEnum):
    COMMON = "common"
    ANDROID = "android"
    IOS = "ios"


def build_default_checks(settings: ChecksSettings, platform: Platform = Platform.COMMON) -> list[BaseCheck]:
    """Common checks, followed by the presets of ``platform``."""
    test_file_rules = ANDROID_TEST_FILE_RULES if platform == Platform.ANDROID else DEFAULT_TEST_FILE_RULES
    checks: list[BaseCheck] = [
        MissingTestsCheck(
            MissingTestsConfig(
                bypass_label=settings.unit_tests_bypass_label,
                test_file_rules=test_file_rules,
            )
        ),
        LabelsCheck(LabelsConfig(do_not_merge_labels=tuple(settings.do_not_merge_labels))),
        MilestoneDueDateCheck(MilestoneDueDateConfig(days_before_due=settings.milestone_days_before_due)),
        DiffSizeCheck(DiffSizeConfig(max_size=settings.max_diff_size)),
        PrBodyCheck(PrBodyConfig(min_length=settings.min_pr_body_length)),
        ViewChangesNeedScreenshotsCheck(),
        internal_release_notes_changed(),
        ManifestLockCheck(GEMFILE),
    ]
    if platform == Platform.ANDROID:
        checks += _android_checks()
    elif platform == Platform.IOS:
        checks += _ios_checks(settings)
    return checks


def _android_checks() -> list[BaseCheck]:
    return [
        android_release_notes_and_play_store_strings(),
        android_modified_strings_on_release(),
        strings_do_not_refer_resource(),
    ]


def _ios_checks(settings: ChecksSettings) -> list[BaseCheck]:
    return [
        ios_core_data_model_changed(),
        ios_modified_localizable_strings_on_release(),
        ios_modified_en_strings_on_regular_branch(),
        ios_modified_translations_on_release_branch(),
        ios_release_notes_and_app_store_strings(),
        ManifestLockCheck(PODFILE),
        podfile_commit_references(settings.podfile_lock_path),
        podfile_branch_references(settings.podfile_lock_path),
    ]
