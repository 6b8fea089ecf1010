"""Predicates on the pull request's base branch, labels and title."""

from pr_checks.core.application.ports import PullRequestPort

MAIN_BRANCHES = frozenset({"trunk", "main", "master", "develop"})
RELEASE_BRANCH_PREFIXES = ("release/", "hotfix/")
WIP_MARKER = "WIP"


def is_main_branch(pull_request: PullRequestPort) -> bool:
    return pull_request.base_branch() in MAIN_BRANCHES


def is_release_branch(pull_request: PullRequestPort) -> bool:
    return pull_request.base_branch().startswith(RELEASE_BRANCH_PREFIXES)


def is_wip(pull_request: PullRequestPort) -> bool:
    has_wip_label = any(WIP_MARKER in label for label in pull_request.labels())
    return has_wip_label or WIP_MARKER in (pull_request.title() or "")
