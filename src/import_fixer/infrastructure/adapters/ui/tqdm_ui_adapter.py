"""
Plain-terminal UI: colorama colors, a tqdm description line while the build
log is scanned, and questions read line by line from stdin.
"""
import sys
from typing import List, Optional, TextIO

import colorama
from tqdm import tqdm

from import_fixer.domain.ports.ui_service import (
    LogLevel, UIServicePort, StatusPort, TablePort
)

colorama.just_fix_windows_console()

RESET = colorama.Style.RESET_ALL
RULE_COLOR = colorama.Fore.CYAN
LEVEL_COLORS = {
    LogLevel.INFO: colorama.Fore.CYAN,
    LogLevel.SUCCESS: colorama.Fore.GREEN,
    LogLevel.WARNING: colorama.Fore.YELLOW,
    LogLevel.ERROR: colorama.Fore.RED,
}


class TqdmStatus(StatusPort):

    def __init__(self, bar: tqdm):
        self.bar = bar

    def stop(self) -> None:
        self.bar.close()


class TqdmTable(TablePort):
    """Pipe-separated columns padded to the widest cell."""

    def __init__(self, columns: List[str], title: str, stream: TextIO):
        self.columns = columns
        self.title = title
        self.stream = stream
        self.rows = []

    def add_row(self, *values) -> None:
        self.rows.append([str(value) for value in values[:len(self.columns)]])

    def render(self) -> None:
        widths = [max([len(column)] + [len(row[i]) for row in self.rows if i < len(row)])
                  for i, column in enumerate(self.columns)]
        header = " | ".join(column.ljust(width) for column, width in zip(self.columns, widths))
        if self.title:
            print(self.title, file=self.stream)
        print(RULE_COLOR + header + RESET, file=self.stream)
        print("-" * len(header), file=self.stream)
        for row in self.rows:
            print(" | ".join(cell.ljust(width) for cell, width in zip(row, widths)), file=self.stream)


class TqdmUIAdapter(UIServicePort):
    """
    Streams default to the process's stdin/stdout, looked up on every call
    so a swapped `sys.stdout` is honoured.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None, width: int = 80):
        self.stdin = stdin
        self.stdout = stdout
        self.width = width

    @property
    def _out(self) -> TextIO:
        return self.stdout or sys.stdout

    @property
    def _in(self) -> TextIO:
        return self.stdin or sys.stdin

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        print(f"{LEVEL_COLORS[level]}{message}{RESET}", file=self._out)

    def status(self, message: str) -> TqdmStatus:
        # total=0 with a description-only format draws a single line
        return TqdmStatus(tqdm(total=0, desc=message, bar_format='{desc}', file=self._out))

    def table(self, columns: List[str], title: str = "") -> TqdmTable:
        return TqdmTable(columns, title, self._out)

    def panel(self, content: str, title: str = "") -> None:
        top = f" {title} ".center(self.width, "=") if title else "=" * self.width
        print(RULE_COLOR + top + RESET, file=self._out)
        print(content, file=self._out)
        print(RULE_COLOR + "=" * self.width + RESET, file=self._out)

    def prompt(self, message: str) -> Optional[str]:
        print(f"{colorama.Fore.CYAN}{colorama.Style.BRIGHT}{message}{RESET}", file=self._out)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")
