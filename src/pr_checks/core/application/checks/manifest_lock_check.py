from dataclasses import dataclass

from pr_checks.core.application.checks.base_check import BaseCheck, CheckContext
from pr_checks.core.application.exceptions import InvalidCheckConfigError
from pr_checks.core.domain.quality import CheckOutcome, ReportSeverity


@dataclass(frozen=True)
class ManifestLockConfig:
    manifest_file: str
    lock_file: str
    instruction: str

    def __post_init__(self) -> None:
        if not self.manifest_file.strip() or not self.lock_file.strip():
            raise InvalidCheckConfigError(
                "Manifest and lock file names are required.",
                context={"manifest_file": self.manifest_file, "lock_file": self.lock_file},
            )


GEMFILE = ManifestLockConfig(
    manifest_file="Gemfile",
    lock_file="Gemfile.lock",
    instruction="Please run `bundle install` or `bundle update <updated_gem>`",
)
PODFILE = ManifestLockConfig(
    manifest_file="Podfile",
    lock_file="Podfile.lock",
    instruction="Please run `bundle exec pod install`",
)
SWIFT_PACKAGE = ManifestLockConfig(
    manifest_file="Package.swift",
    lock_file="Package.resolved",
    instruction="Please resolve the Swift packages in Xcode",
)


class ManifestLockCheck(BaseCheck):
    """Warns when a dependency manifest changed but its lockfile did not."""

    name = "manifest_lock"

    def __init__(self, config: ManifestLockConfig) -> None:
        self._config = config

    def evaluate(self, context: CheckContext) -> list[CheckOutcome]:
        modified = context.vcs.modified_files()
        if self._config.manifest_file not in modified or self._config.lock_file in modified:
            return []
        message = (
            f"{self._config.manifest_file} was changed without updating {self._config.lock_file}. "
            f"{self._config.instruction}."
        )
        return [CheckOutcome(message=message, severity=ReportSeverity.WARNING)]
