"""Blocks pull requests that add production classes without new tests."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext
from pr_checks.core.application.diff import (
    DEFAULT_CLASSES_EXCEPTIONS,
    DEFAULT_SUBCLASSES_EXCEPTIONS,
    DEFAULT_TEST_FILE_RULES,
    MissingTestDetector,
)
from pr_checks.core.application.diff.missing_test_detector import RegexLike
from pr_checks.core.application.diff.path_rules import PathRule
from pr_checks.core.domain.quality import CheckOutcome, ClassViolation, ReportSeverity

logger = structlog.get_logger()

DEFAULT_UNIT_TESTS_BYPASS_LABEL = "unit-tests-exemption"


@dataclass(frozen=True)
class MissingTestsConfig:
    classes_exceptions: Sequence[RegexLike] = DEFAULT_CLASSES_EXCEPTIONS
    subclasses_exceptions: Sequence[RegexLike] = DEFAULT_SUBCLASSES_EXCEPTIONS
    path_exceptions: Sequence[str] = ()
    bypass_label: str = DEFAULT_UNIT_TESTS_BYPASS_LABEL
    test_file_rules: tuple[PathRule, ...] = field(default=DEFAULT_TEST_FILE_RULES)


class MissingTestsCheck(BaseCheck):
    """Reports every class violation as an error, or as a warning when the bypass label is set."""

    name = "missing_tests"

    def __init__(self, config: MissingTestsConfig | None = None) -> None:
        self._config = config or MissingTestsConfig()
        self._detector = MissingTestDetector(test_file_rules=self._config.test_file_rules)

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        violations = self._detector.find_violations(
            context.vcs.full_changeset_diff(),
            classes_exceptions=self._config.classes_exceptions,
            subclasses_exceptions=self._config.subclasses_exceptions,
            path_exceptions=self._config.path_exceptions,
        )
        if not violations:
            return []

        bypassed = self._config.bypass_label in context.pull_request.labels()
        logger.info("Classes missing tests", count=len(violations), bypassed=bypassed)
        return [self._outcome(violation, bypassed) for violation in violations]

    def _outcome(self, violation: ClassViolation, bypassed: bool) -> CheckOutcome:
        label = self._config.bypass_label
        if bypassed:
            return CheckOutcome(
                message=(
                    f"Class `{violation.class_name}` is missing tests, "
                    f"but `{label}` label was set to ignore this."
                ),
                severity=ReportSeverity.WARNING,
            )
        return CheckOutcome(
            message=(
                f"Please add tests for class `{violation.class_name}` "
                f"(or add `{label}` label to ignore this)."
            ),
            severity=ReportSeverity.ERROR,
        )
