import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePosixPath

from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext
from pr_checks.core.application.checks.labels_check import LabelsCheck, LabelsConfig
from pr_checks.core.application.diff import all_changed_files, matching_lines_in_diff_files
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity

TRACKS_PR_INSTRUCTIONS = (
    "This PR contains changes to Tracks-related logic. "
    "Please ensure (**author and reviewer**) the following are completed:\n"
    "\n"
    "- The PR must be assigned the **Tracks** label.\n"
    "- The tracks events must be validated in the Tracks system.\n"
    "- Verify the internal Tracks spreadsheet has also been updated.\n"
    "- Please consider registering any new events.\n"
)
TRACKS_NO_LABEL_MESSAGE = "Please ensure the PR has the `Tracks` label."
TRACKS_LABEL = re.compile(r"Tracks")


@dataclass(frozen=True)
class TracksConfig:
    tracks_files: Sequence[str]
    tracks_usage_matchers: Sequence[re.Pattern[str]]


class TracksCheck(BaseCheck):
    """Requires the Tracks label and posts instructions when analytics code changes."""

    name = "tracks"

    def __init__(self, config: TracksConfig) -> None:
        self._config = config
        self._labels_check = LabelsCheck(
            LabelsConfig(
                do_not_merge_labels=(),
                required_labels=(TRACKS_LABEL,),
                required_labels_error=TRACKS_NO_LABEL_MESSAGE,
            )
        )

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        if not (self._changes_tracks_files(context) or self._diff_has_tracks_changes(context)):
            return []

        outcomes = self._labels_check.evaluate(context)
        outcomes.append(CheckOutcome(message=TRACKS_PR_INSTRUCTIONS, severity=ReportSeverity.MESSAGE))
        return outcomes

    def _changes_tracks_files(self, context: CheckContext) -> bool:
        tracked_names = {PurePosixPath(path).name for path in self._config.tracks_files}
        return any(PurePosixPath(path).name in tracked_names for path in all_changed_files(context.vcs))

    def _diff_has_tracks_changes(self, context: CheckContext) -> bool:
        matched = matching_lines_in_diff_files(
            context.vcs,
            all_changed_files(context.vcs),
            lambda line: any(re.search(matcher, line) for matcher in self._config.tracks_usage_matchers),
            change_type=None,
        )
        return bool(matched)
