"""
Console ports used by the fix command: messages, a scan spinner, the summary
table, the startup banner and the module question.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional


class LogLevel(Enum):
    """Severity of a console message. The value doubles as the style name."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class StatusPort(ABC):
    """A running activity indicator, shown while the build log is scanned."""

    @abstractmethod
    def stop(self) -> None:
        """Removes the indicator from the console."""


class TablePort(ABC):
    """Rows of patch outcomes, drawn once all rows are added."""

    @abstractmethod
    def add_row(self, *values) -> None:
        pass

    @abstractmethod
    def render(self) -> None:
        pass


class UIServicePort(ABC):
    """Everything the fix command shows to, or asks of, the person running it."""

    @abstractmethod
    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        """Prints one message styled by `level`. Text is shown literally."""

    @abstractmethod
    def status(self, message: str) -> StatusPort:
        """Starts an activity indicator labelled `message`."""

    @abstractmethod
    def table(self, columns: List[str], title: str = "") -> TablePort:
        pass

    @abstractmethod
    def panel(self, content: str, title: str = "") -> None:
        """Prints `content` framed, under `title`."""

    @abstractmethod
    def prompt(self, message: str) -> Optional[str]:
        """
        Asks `message` and reads one answer line.

        Returns:
            The line without its line ending, or None once input is exhausted
        """
