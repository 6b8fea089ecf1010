from conftest import make_context, make_file_diff
from pr_checks.core.application.reporting import ReportSink
from pr_checks.core.application.services import CheckRunner
from pr_checks.core.domain.diff import FileChangeKind
from pr_checks.infrastructure.configuration import ChecksSettings
from pr_checks.infrastructure.reporting import StatusReport
from pr_checks.infrastructure.resolution import Platform, build_default_checks

COMMON = [
    "missing_tests",
    "labels",
    "milestone_due_date",
    "diff_size",
    "pr_body",
    "view_changes_need_screenshots",
    "release_file_changed",
    "manifest_lock",
]


def _settings(**overrides: object) -> ChecksSettings:
    return ChecksSettings(_env_file=None, **overrides)


class TestBuildDefaultChecks:
    def test_common_suite(self) -> None:
        assert [check.name for check in build_default_checks(_settings())] == COMMON

    def test_android_preset(self) -> None:
        names = [check.name for check in build_default_checks(_settings(), Platform.ANDROID)]

        assert names[: len(COMMON)] == COMMON
        assert names[len(COMMON) :] == [
            "release_notes_store_strings",
            "release_file_changed",
            "android_strings_refer_resource",
        ]

    def test_ios_preset_reads_configured_lockfile(self) -> None:
        checks = build_default_checks(_settings(podfile_lock_path="ios/Podfile.lock"), Platform.IOS)
        context = make_context(files={"ios/Podfile.lock": "DEPENDENCIES:\n  - Foo (from `x`, commit `abc`)\n"})

        report = StatusReport()
        CheckRunner(checks, ReportSink(report)).run(context)

        assert report.errors == ["Podfile reference(s) to a commit hash:\n```Foo (from `x`, commit `abc`)```"]

    def test_settings_flow_into_checks(self) -> None:
        checks = build_default_checks(
            _settings(unit_tests_bypass_label="skip-tests", do_not_merge_labels=["Blocked"], max_diff_size=1)
        )
        changeset = [make_file_diff("Foo.kt", added=["class Foo {", "}"], change_kind=FileChangeKind.NEW)]
        context = make_context(changeset, labels=["skip-tests", "Blocked"], body="A long enough body.")

        report = StatusReport()
        CheckRunner(checks, ReportSink(report)).run(context)

        assert report.errors == ["This PR is tagged with `Blocked` label(s)."]
        assert "Class `Foo` is missing tests, but `skip-tests` label was set to ignore this." in report.warnings
        assert any(warning.startswith("This PR is larger than 1 lines") for warning in report.warnings)
