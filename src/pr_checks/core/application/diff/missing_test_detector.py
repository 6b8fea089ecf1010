"""Finds production classes added in a changeset that no new test refers to."""

import re
from collections.abc import Iterable, Sequence
from fnmatch import fnmatchcase

import structlog

from pr_checks.core.application.diff.class_declaration_extractor import (
    ANY_CLASS_DETECTOR,
    NON_PRIVATE_CLASS_DETECTOR,
    extract_class_declarations,
    extract_class_names,
)
from pr_checks.core.application.diff.diff_line_classifier import (
    added_lines,
    removed_lines,
    select_lines,
)
from pr_checks.core.application.diff.path_rules import (
    DEFAULT_TEST_FILE_RULES,
    PathRule,
    is_test_file,
)
from pr_checks.core.domain.diff import ChangeType, FileDiff
from pr_checks.core.domain.quality import ClassViolation

logger = structlog.get_logger()

RegexLike = str | re.Pattern[str]

DEFAULT_CLASSES_EXCEPTIONS: tuple[re.Pattern[str], ...] = (
    re.compile(r"ViewHolder$"),
    re.compile(r"Module$"),
    re.compile(r"Button$"),
)

DEFAULT_SUBCLASSES_EXCEPTIONS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(Fragment|Activity)\b"),
    re.compile(r"RecyclerView"),
    re.compile(r"^BroadcastReceiver$"),
    re.compile(r"^ContentProvider$"),
    re.compile(r"Service$"),
    re.compile(r"View$"),
    re.compile(r"ViewGroup$"),
    re.compile(r"Layout$"),
)


class MissingTestDetector:
    """Aggregates per-file class declarations across a changeset and filters them.

    A candidate survives when it is declared in added lines of a non-test file,
    is not declared in removed lines anywhere in the changeset (a move or
    rename), matches no class or supertype exception, and is not referenced as
    a whole word by any line added to a test file.
    """

    def __init__(self, test_file_rules: tuple[PathRule, ...] = DEFAULT_TEST_FILE_RULES) -> None:
        self._test_file_rules = test_file_rules

    def find_violations(
        self,
        changeset: Iterable[FileDiff],
        classes_exceptions: Sequence[RegexLike] = DEFAULT_CLASSES_EXCEPTIONS,
        subclasses_exceptions: Sequence[RegexLike] = DEFAULT_SUBCLASSES_EXCEPTIONS,
        path_exceptions: Sequence[str] = (),
    ) -> list[ClassViolation]:
        candidates: list[ClassViolation] = []
        removed_class_names: set[str] = set()
        added_test_lines: list[str] = []

        for file_diff in changeset:
            if _matches_any_glob(file_diff.path, path_exceptions):
                logger.debug("Skipping path exception", file_path=file_diff.path)
                continue

            if is_test_file(file_diff.path, self._test_file_rules):
                added_test_lines += select_lines(file_diff.patch, ChangeType.ADDED)
                continue

            candidates += self._added_classes(file_diff)
            removed_class_names.update(
                extract_class_names(removed_lines(file_diff.patch), ANY_CLASS_DETECTOR)
            )

        violations = [
            candidate
            for candidate in candidates
            if candidate.class_name not in removed_class_names
            and not _is_exception(candidate, classes_exceptions, subclasses_exceptions)
            and not _is_referenced(candidate.class_name, added_test_lines)
        ]
        logger.debug(
            "Missing test detection finished",
            candidates=len(candidates),
            removed_classes=len(removed_class_names),
            violations=len(violations),
        )
        return violations

    @staticmethod
    def _added_classes(file_diff: FileDiff) -> list[ClassViolation]:
        declarations = extract_class_declarations(
            added_lines(file_diff.patch), file_diff.path, NON_PRIVATE_CLASS_DETECTOR
        )
        return [
            ClassViolation(
                class_name=declaration.class_name,
                file_path=file_diff.path,
                supertype=declaration.supertype,
            )
            for declaration in declarations
        ]


def _matches_any_glob(path: str, globs: Sequence[str]) -> bool:
    return any(fnmatchcase(path, glob) for glob in globs)


def _matches_any_regex(value: str | None, patterns: Sequence[RegexLike]) -> bool:
    if value is None:
        return False
    return any(re.search(pattern, value) for pattern in patterns)


def _is_exception(
    violation: ClassViolation,
    classes_exceptions: Sequence[RegexLike],
    subclasses_exceptions: Sequence[RegexLike],
) -> bool:
    return _matches_any_regex(violation.class_name, classes_exceptions) or _matches_any_regex(
        violation.supertype, subclasses_exceptions
    )


def _is_referenced(class_name: str, test_lines: list[str]) -> bool:
    usage = re.compile(rf"\b{re.escape(class_name)}\b")
    return any(usage.search(line) for line in test_lines)
