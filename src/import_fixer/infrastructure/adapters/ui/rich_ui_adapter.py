"""
Console UI drawn with rich. Messages, table cells, banners and questions are
escaped, so file paths containing brackets print as written.
"""
from typing import List, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table
from rich.theme import Theme

from import_fixer.domain.ports.ui_service import (
    LogLevel, UIServicePort, StatusPort, TablePort
)

THEME = Theme({
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
    "prompt": "bold cyan",
    "progress.description": "cyan",
    "progress.elapsed": "cyan",
    "panel.border": "cyan",
    "panel.title": "cyan bold",
})


class RichStatus(StatusPort):
    """One spinner task on the adapter's shared Progress."""

    def __init__(self, progress: Progress, task_id: int):
        self.progress = progress
        self.task_id = task_id

    def stop(self) -> None:
        self.progress.stop_task(self.task_id)
        self.progress.remove_task(self.task_id)
        # Leave the live display once the last spinner is gone
        if not self.progress.tasks:
            self.progress.stop()


class RichTable(TablePort):

    def __init__(self, table: Table, console: Console):
        self.table = table
        self.console = console

    def add_row(self, *values) -> None:
        self.table.add_row(*(escape(str(value)) for value in values))

    def render(self) -> None:
        self.console.print(self.table)


class RichUIAdapter(UIServicePort):
    """
    Themed console UI.

    `ui.progress_style: spinner` adds elapsed time next to the scan spinner;
    any other value shows the spinner and label only.
    """

    def __init__(self, config: dict = None, console: Optional[Console] = None, stdin: Optional[TextIO] = None):
        self.stdin = stdin
        ui_config = (config or {}).get('ui', {})
        self.console = console or Console(theme=THEME)

        columns = [SpinnerColumn(), TextColumn("[progress.description]{task.description}")]
        if str(ui_config.get('progress_style', 'spinner')).lower() == 'spinner':
            columns.append(TimeElapsedColumn())
        # Started by status() so questions are never drawn under a live display
        self.progress = Progress(*columns, console=self.console, transient=True)

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        style = level.value
        self.console.print(f"[{style}]{escape(message)}[/{style}]")

    def status(self, message: str) -> RichStatus:
        self.progress.start()
        task_id = self.progress.add_task(escape(message), total=None)
        return RichStatus(self.progress, task_id)

    def table(self, columns: List[str], title: str = "") -> RichTable:
        table = Table(title=title or None)
        for column in columns:
            table.add_column(column)
        return RichTable(table, self.console)

    def panel(self, content: str, title: str = "") -> None:
        self.console.print(Panel(escape(content), title=escape(title) if title else None))

    def prompt(self, message: str) -> Optional[str]:
        """
        Reads the answer from `stdin` when one was given, from the terminal otherwise.

        An empty read from `stdin` means the stream is exhausted.
        """
        question = f"[prompt]{escape(message)}[/prompt] "
        try:
            if self.stdin is not None:
                answer = self.console.input(question, stream=self.stdin)
                if answer == "":
                    return None
            else:
                answer = self.console.input(question)
        except EOFError:
            return None
        return answer.rstrip("\r\n")
