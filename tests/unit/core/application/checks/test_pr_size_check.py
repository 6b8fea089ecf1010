import pytest

from conftest import make_context, make_file_diff
from pr_checks.core.application.checks import (
    DiffSizeCheck,
    DiffSizeConfig,
    DiffSizeKind,
    PrBodyCheck,
    PrBodyConfig,
)
from pr_checks.core.application.exceptions import InvalidCheckConfigError
from pr_checks.core.domain.quality import ReportSeverity

# ── Fixtures ──

CHANGESET = [
    make_file_diff("src/Foo.kt", added=["a", "b", "c"], removed=["d"]),
    make_file_diff("src/test/FooTest.kt", added=["e", "f"]),
]


class TestDiffSizeCheck:
    def test_reports_when_above_max(self) -> None:
        outcomes = DiffSizeCheck(DiffSizeConfig(max_size=5)).evaluate(make_context(CHANGESET))

        assert [(o.message, o.severity) for o in outcomes] == [
            (
                "This PR is larger than 5 lines of changes. "
                "Please consider splitting it into smaller PRs for easier and faster reviews.",
                ReportSeverity.WARNING,
            )
        ]

    def test_equal_to_max_is_fine(self) -> None:
        assert DiffSizeCheck(DiffSizeConfig(max_size=6)).evaluate(make_context(CHANGESET)) == []

    def test_counts_only_requested_kind(self) -> None:
        check = DiffSizeCheck(DiffSizeConfig(max_size=1, counted=DiffSizeKind.DELETIONS))

        assert check.evaluate(make_context(CHANGESET)) == []

    def test_file_selector_and_custom_message(self) -> None:
        config = DiffSizeConfig(
            max_size=2,
            counted=DiffSizeKind.INSERTIONS,
            file_selector=lambda path: "/test/" not in path,
            message="Too big.",
            severity=ReportSeverity.ERROR,
        )

        outcomes = DiffSizeCheck(config).evaluate(make_context(CHANGESET))

        assert [(o.message, o.severity) for o in outcomes] == [("Too big.", ReportSeverity.ERROR)]

    def test_negative_max_is_rejected(self) -> None:
        with pytest.raises(InvalidCheckConfigError):
            DiffSizeConfig(max_size=-1)


class TestPrBodyCheck:
    @pytest.mark.parametrize("body", ["", "short", "ten chars!"])
    def test_short_body_is_reported(self, body: str) -> None:
        outcomes = PrBodyCheck().evaluate(make_context(body=body))

        assert outcomes[0].message.startswith(
            "The PR description appears very short, less than 10 characters long."
        )

    def test_long_enough_body(self) -> None:
        assert PrBodyCheck().evaluate(make_context(body="eleven char")) == []

    def test_custom_min_length_and_severity(self) -> None:
        check = PrBodyCheck(PrBodyConfig(min_length=0, severity=ReportSeverity.NONE))

        assert check.evaluate(make_context(body="")) == []
