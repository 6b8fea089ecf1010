from pr_checks.core.application.services.branch_rules import (
    is_main_branch,
    is_release_branch,
    is_wip,
)
from pr_checks.core.application.services.check_runner import CheckRunner

__all__ = ["CheckRunner", "is_main_branch", "is_release_branch", "is_wip"]
