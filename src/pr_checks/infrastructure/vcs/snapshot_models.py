"""Pydantic models describing a pull request captured as a JSON or YAML document."""

import json
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from pr_checks.core.domain.pull_request import Milestone


class MilestoneSnapshot(BaseModel):
    title: str
    url: str = ""
    due_on: datetime | None = None

    def to_domain(self) -> Milestone:
        return Milestone(title=self.title, url=self.url, due_on=self.due_on)


class PullRequestSnapshot(BaseModel):
    """Everything the checks read about one pull request.

    ``diff`` holds the raw multi-file ``git diff``; ``files`` maps repository
    paths to contents for checks that read files directly.
    """

    title: str = ""
    body: str = ""
    labels: list[str] = Field(default_factory=list)
    base_branch: str = "trunk"
    state: str = "open"
    milestone: MilestoneSnapshot | None = None
    diff: str = ""
    files: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str | Path) -> "PullRequestSnapshot":
        """Load a snapshot; ``.yml``/``.yaml`` files are read as YAML, anything else as JSON."""
        source = Path(path)
        text = source.read_text(encoding="utf-8")
        if source.suffix.lower() in (".yml", ".yaml"):
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
        return cls.model_validate(data)
