"""
Pytest configuration for unit tests.

Provides a scripted UI double and helpers for writing build logs and source files.
"""
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

from import_fixer.domain.ports.ui_service import LogLevel, StatusPort, TablePort, UIServicePort


class RecordingStatus(StatusPort):
    def __init__(self, message: str):
        self.message = message
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class RecordingTable(TablePort):
    def __init__(self, columns: List[str], title: str = ""):
        self.columns = columns
        self.title = title
        self.rows = []
        self.rendered = False

    def add_row(self, *values) -> None:
        self.rows.append(values)

    def render(self) -> None:
        self.rendered = True


class ScriptedUI(UIServicePort):
    """UI double that answers prompts from a fixed list; None once the list is exhausted."""

    def __init__(self, answers: Iterable[Optional[str]] = ()):
        self.answers = list(answers)
        self.prompts = []
        self.messages = []
        self.panels = []
        self.statuses = []
        self.tables = []

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        self.messages.append((level, message))

    def status(self, message: str) -> RecordingStatus:
        status = RecordingStatus(message)
        self.statuses.append(status)
        return status

    def table(self, columns: List[str], title: str = "") -> RecordingTable:
        table = RecordingTable(columns, title)
        self.tables.append(table)
        return table

    def panel(self, content: str, title: str = "") -> None:
        self.panels.append((title, content))

    def prompt(self, message: str) -> Optional[str]:
        self.prompts.append(message)
        if not self.answers:
            return None
        return self.answers.pop(0)

    def messages_at(self, level: LogLevel) -> List[str]:
        return [message for msg_level, message in self.messages if msg_level is level]


def missing_type_line(path: Path, type_name: str, line: int = 1, column: int = 1) -> str:
    return f"{path}:{line}:{column}: error: cannot find '{type_name}' in scope"


@pytest.fixture
def scripted_ui():
    """Factory fixture: scripted_ui(["Bar", ...]) returns a ScriptedUI."""
    def _make(answers: Iterable[Optional[str]] = ()) -> ScriptedUI:
        return ScriptedUI(answers)
    return _make


@pytest.fixture
def write_build_log(tmp_path):
    """Writes the given lines to a build log in tmp_path and returns its path."""
    def _write(lines: Iterable[str], name: str = "output.txt") -> Path:
        log_path = tmp_path / name
        log_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return log_path
    return _write


@pytest.fixture
def source_file(tmp_path):
    """Creates a source file under tmp_path/Sources with the given text."""
    def _create(name: str, content: str) -> Path:
        path = tmp_path / "Sources" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path
    return _create
