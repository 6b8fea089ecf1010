from dataclasses import dataclass


@dataclass(frozen=True)
class ClassDeclarationMatch:
    """A class name found by the declaration heuristic, with its supertype token if any."""

    class_name: str
    supertype: str | None = None
