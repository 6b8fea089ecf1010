import json

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pr_checks.core.application.checks.labels_check import DEFAULT_DO_NOT_MERGE_LABELS
from pr_checks.core.application.checks.milestone_check import DEFAULT_DAYS_BEFORE_DUE
from pr_checks.core.application.checks.missing_tests_check import DEFAULT_UNIT_TESTS_BYPASS_LABEL
from pr_checks.core.application.checks.podfile_lock_check import DEFAULT_PODFILE_LOCK_PATH
from pr_checks.core.application.checks.pr_size_check import DEFAULT_MAX_DIFF_SIZE, DEFAULT_MIN_PR_BODY


class ChecksSettings(BaseSettings):
    """Settings for the default check suite, read from ``PR_CHECKS_*`` env vars or ``.env``."""

    # ── Logging ──
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="", description="json|console; empty selects by APP_ENV")

    # ── Check thresholds ──
    unit_tests_bypass_label: str = Field(default=DEFAULT_UNIT_TESTS_BYPASS_LABEL)
    max_diff_size: int = Field(default=DEFAULT_MAX_DIFF_SIZE, ge=0)
    min_pr_body_length: int = Field(default=DEFAULT_MIN_PR_BODY, ge=0)
    milestone_days_before_due: int = Field(default=DEFAULT_DAYS_BEFORE_DUE, ge=0)
    do_not_merge_labels: list[str] = Field(default_factory=lambda: list(DEFAULT_DO_NOT_MERGE_LABELS))
    podfile_lock_path: str = Field(default=DEFAULT_PODFILE_LOCK_PATH)

    @field_validator("do_not_merge_labels", mode="before")
    @classmethod
    def parse_json_list(cls, value: object) -> list[str]:
        """Parse a JSON string from .env into a Python list."""
        if isinstance(value, str):
            parsed = json.loads(value)
            if not isinstance(parsed, list):
                raise ValueError(f"Expected a JSON list, got {type(parsed).__name__}")
            return parsed
        if isinstance(value, list | tuple):
            return list(value)
        return []

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> str:
        return str(value).upper()

    model_config = SettingsConfigDict(env_prefix="PR_CHECKS_", env_file=".env", extra="ignore")
