import re

from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity

VIEW_FILES_IOS = re.compile(r"(View|Button)\.(swift|m)$|\.xib$|\.storyboard$")
VIEW_FILES_ANDROID = re.compile(r"(View|Button)\.(java|kt|xml)$", re.IGNORECASE)

IMAGE_IN_PR_BODY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"https?://\S*\.(gif|jpg|jpeg|png|svg)"),
    re.compile(r"!\[(.*?)\]\((.*?)\)"),
    re.compile(r"<img\s+[^>]*src\s*=\s*[^>]*>"),
)

MESSAGE_VIEW_CHANGES = (
    "View files have been modified, but no screenshot is included in the pull request. "
    "Consider adding some for clarity."
)


class ViewChangesNeedScreenshotsCheck(BaseCheck):
    name = "view_changes_need_screenshots"

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        view_files_modified = any(
            VIEW_FILES_IOS.search(path) or VIEW_FILES_ANDROID.search(path)
            for path in context.vcs.modified_files()
        )
        if not view_files_modified:
            return []

        body = context.pull_request.body() or ""
        if any(pattern.search(body) for pattern in IMAGE_IN_PR_BODY_PATTERNS):
            return []
        return [CheckOutcome(message=MESSAGE_VIEW_CHANGES, severity=ReportSeverity.WARNING)]
