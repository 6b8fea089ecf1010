from abc import ABC, abstractmethod

from pr_checks.core.domain.diff import FileDiff


class VcsPort(ABC):
    """Source-control facts about the pull request, already materialized by the host."""

    @abstractmethod
    def added_files(self) -> list[str]:
        pass

    @abstractmethod
    def modified_files(self) -> list[str]:
        pass

    @abstractmethod
    def deleted_files(self) -> list[str]:
        pass

    @abstractmethod
    def diff_for_file(self, path: str) -> FileDiff:
        """Single-file patch. Files without changes yield an empty patch."""
        pass

    @abstractmethod
    def full_changeset_diff(self) -> list[FileDiff]:
        """Every per-file diff of the pull request, in host order."""
        pass

    @abstractmethod
    def read_file(self, path: str) -> str:
        """Committed file content. Raises ``FileNotFoundError`` when missing."""
        pass
