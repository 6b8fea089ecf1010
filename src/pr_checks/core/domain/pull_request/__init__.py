from pr_checks.core.domain.pull_request.milestone import Milestone

__all__ = ["Milestone"]
