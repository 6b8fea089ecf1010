from abc import ABC, abstractmethod

from pr_checks.core.domain.pull_request import Milestone


class PullRequestPort(ABC):
    @abstractmethod
    def labels(self) -> list[str]:
        pass

    @abstractmethod
    def body(self) -> str:
        pass

    @abstractmethod
    def title(self) -> str:
        pass

    @abstractmethod
    def base_branch(self) -> str:
        pass

    @abstractmethod
    def state(self) -> str:
        pass

    @abstractmethod
    def milestone(self) -> Milestone | None:
        pass
