from pr_checks.core.application.ports.pull_request_port import PullRequestPort
from pr_checks.core.application.ports.report_port import ReportPort
from pr_checks.core.application.ports.vcs_port import VcsPort

__all__ = ["PullRequestPort", "ReportPort", "VcsPort"]
