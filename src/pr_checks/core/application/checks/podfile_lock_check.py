"""Podfile.lock must not pin pods to a commit or a branch."""

import re
from collections.abc import Callable
from pathlib import PurePosixPath

import structlog
import yaml

from pr_checks.core.application.checks.added_diff_lines_check import (
    AddedDiffLinesCheck,
    AddedDiffLinesConfig,
)
from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext, single_outcome
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity

logger = structlog.get_logger()

PODFILE_LOCK = "Podfile.lock"
PODFILE_LOCK_DEPENDENCIES_ENTRY = "DEPENDENCIES"
DEFAULT_PODFILE_LOCK_PATH = "./Podfile.lock"

COMMIT_REFERENCE_REGEXP = re.compile(r"\(from `\S+`, commit `\S+`\)")
BRANCH_REFERENCE_REGEXP = re.compile(r"\(from `\S+`, branch `\S+`\)")


def _references_message(kind: str) -> Callable[[list[str]], str]:
    def build(matches: list[str]) -> str:
        joined = "\n".join(matches)
        return f"Podfile reference(s) to a {kind}:\n```{joined}```"

    return build


class PodfileLockReferencesCheck(BaseCheck):
    """Reads the committed lockfile; a missing lockfile raises ``FileNotFoundError``."""

    name = "podfile_lock_references"

    def __init__(
        self,
        regexp: re.Pattern[str],
        message_builder: Callable[[list[str]], str],
        podfile_lock_path: str = DEFAULT_PODFILE_LOCK_PATH,
        severity: ReportSeverity = ReportSeverity.ERROR,
    ) -> None:
        self._regexp = regexp
        self._message_builder = message_builder
        self._podfile_lock_path = podfile_lock_path
        self._severity = severity

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        lock_data = yaml.safe_load(context.vcs.read_file(self._podfile_lock_path)) or {}
        dependencies = lock_data.get(PODFILE_LOCK_DEPENDENCIES_ENTRY) or []

        references = [
            str(dependency) for dependency in dependencies if self._regexp.search(str(dependency))
        ]
        if not references:
            return []
        logger.info("Podfile.lock pinned references found", count=len(references))
        return single_outcome(self._message_builder(references), self._severity)


def podfile_commit_references(
    podfile_lock_path: str = DEFAULT_PODFILE_LOCK_PATH,
    severity: ReportSeverity = ReportSeverity.ERROR,
) -> PodfileLockReferencesCheck:
    return PodfileLockReferencesCheck(
        COMMIT_REFERENCE_REGEXP, _references_message("commit hash"), podfile_lock_path, severity
    )


def podfile_branch_references(
    podfile_lock_path: str = DEFAULT_PODFILE_LOCK_PATH,
    severity: ReportSeverity = ReportSeverity.ERROR,
) -> PodfileLockReferencesCheck:
    return PodfileLockReferencesCheck(
        BRANCH_REFERENCE_REGEXP, _references_message("branch"), podfile_lock_path, severity
    )


def _is_podfile_lock(path: str) -> bool:
    # CocoaPods always generates this name, so only the basename is compared.
    return PurePosixPath(path).name == PODFILE_LOCK


def podfile_diff_commit_references(severity: ReportSeverity = ReportSeverity.WARNING) -> AddedDiffLinesCheck:
    return AddedDiffLinesCheck(
        AddedDiffLinesConfig(
            file_selector=_is_podfile_lock,
            line_matcher=lambda line: COMMIT_REFERENCE_REGEXP.search(line) is not None,
            message="This PR adds a Podfile reference to a commit hash:",
            severity=severity,
        )
    )


def podfile_diff_branch_references(severity: ReportSeverity = ReportSeverity.WARNING) -> AddedDiffLinesCheck:
    return AddedDiffLinesCheck(
        AddedDiffLinesConfig(
            file_selector=_is_podfile_lock,
            line_matcher=lambda line: BRANCH_REFERENCE_REGEXP.search(line) is not None,
            message="This PR adds a Podfile reference to a branch:",
            severity=severity,
        )
    )
