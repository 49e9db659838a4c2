"""
Front for the console adapter. Without an adapter every message goes to the
`import_fixer` log and questions are read with `input()`.
"""
import logging
from typing import List, Optional

from import_fixer.domain.ports.ui_service import (
    LogLevel, UIServicePort, StatusPort, TablePort
)

logger = logging.getLogger(__name__)

_LOGGING_LEVELS = {
    LogLevel.INFO: logging.INFO,
    LogLevel.SUCCESS: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class UIService(UIServicePort):
    """Forwards to `adapter` when one is given, logs otherwise."""

    def __init__(self, adapter: Optional[UIServicePort] = None):
        self.adapter = adapter

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        if self.adapter:
            self.adapter.log(message, level)
        else:
            logger.log(_LOGGING_LEVELS[level], message)

    def status(self, message: str) -> StatusPort:
        if self.adapter:
            return self.adapter.status(message)
        logger.info(message)
        return LoggedStatus()

    def table(self, columns: List[str], title: str = "") -> TablePort:
        if self.adapter:
            return self.adapter.table(columns, title)
        return LoggedTable(columns, title)

    def panel(self, content: str, title: str = "") -> None:
        if self.adapter:
            self.adapter.panel(content, title)
        else:
            logger.info(f"{title}: {content}" if title else content)

    def prompt(self, message: str) -> Optional[str]:
        if self.adapter:
            return self.adapter.prompt(message)
        try:
            return input(f"{message} ")
        except EOFError:
            return None


class LoggedStatus(StatusPort):
    """Nothing to tear down; the start was logged."""

    def stop(self) -> None:
        pass


class LoggedTable(TablePort):
    """Writes one log record per outcome row."""

    def __init__(self, columns: List[str], title: str = ""):
        self.columns = columns
        self.title = title
        self.rows = []

    def add_row(self, *values) -> None:
        self.rows.append(values)

    def render(self) -> None:
        if self.title:
            logger.info(self.title)
        for row in self.rows:
            logger.info(", ".join(f"{column}={value}" for column, value in zip(self.columns, row)))
