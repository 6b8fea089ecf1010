from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Milestone:
    title: str
    url: str = ""
    due_on: datetime | None = None
