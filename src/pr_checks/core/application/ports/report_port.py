from abc import ABC, abstractmethod


class ReportPort(ABC):
    """Host reporting primitives. Only ``fail`` makes the automated check fail."""

    @abstractmethod
    def fail(self, message: str) -> None:
        pass

    @abstractmethod
    def warn(self, message: str) -> None:
        pass

    @abstractmethod
    def message(self, message: str) -> None:
        pass
