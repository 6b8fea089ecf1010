from pr_checks.infrastructure.vcs.snapshot_adapter import SnapshotPullRequestAdapter
from pr_checks.infrastructure.vcs.snapshot_models import MilestoneSnapshot, PullRequestSnapshot
from pr_checks.infrastructure.vcs.unified_diff_parser import parse_changeset

__all__ = [
    "MilestoneSnapshot",
    "PullRequestSnapshot",
    "SnapshotPullRequestAdapter",
    "parse_changeset",
]
