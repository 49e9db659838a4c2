"""
Unit tests for the console UI adapters and the UI service wrapper.
"""
import io
import logging

import pytest
from rich.console import Console
from rich.progress import TimeElapsedColumn

from import_fixer.application.services.ui_service import LoggedStatus, LoggedTable, UIService
from import_fixer.domain.ports.ui_service import LogLevel
from import_fixer.infrastructure.adapters.ui.rich_ui_adapter import RichUIAdapter, THEME
from import_fixer.infrastructure.adapters.ui.tqdm_ui_adapter import TqdmUIAdapter
from import_fixer.infrastructure.factories.ui_service_factory import create_ui_service


def rich_adapter(stdin=None):
    output = io.StringIO()
    console = Console(file=output, theme=THEME, width=120, color_system=None)
    return RichUIAdapter({}, console=console, stdin=stdin), output


class TestRichUIAdapter:

    def test_prompt_reads_answer(self):
        adapter, output = rich_adapter(io.StringIO("Bar\n"))
        assert adapter.prompt("What module is Foo located in?") == "Bar"
        assert "What module is Foo located in?" in output.getvalue()

    def test_prompt_returns_none_at_end_of_stream(self):
        adapter, _ = rich_adapter(io.StringIO(""))
        assert adapter.prompt("What module is Foo located in?") is None

    def test_prompt_returns_none_on_eof_error(self, monkeypatch):
        def raise_eof(*args, **kwargs):
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)
        adapter, _ = rich_adapter()
        assert adapter.prompt("What module is Foo located in?") is None

    def test_log_does_not_interpret_markup(self):
        adapter, output = rich_adapter()
        adapter.log("Fixed /repo/[generated]/A.swift", LogLevel.SUCCESS)
        assert "Fixed /repo/[generated]/A.swift" in output.getvalue()

    def test_table_renders_rows(self):
        adapter, output = rich_adapter()
        table = adapter.table(["Type", "Module"])
        table.add_row("Foo", "Bar")
        table.render()
        assert "Foo" in output.getvalue() and "Bar" in output.getvalue()

    def test_status_can_be_started_again_after_stop(self):
        adapter, _ = rich_adapter()
        first = adapter.status("Scanning...")
        first.stop()
        second = adapter.status("Scanning again...")
        second.stop()
        assert adapter.progress.tasks == []

    @pytest.mark.parametrize("style, elapsed", [("spinner", True), ("text", False)])
    def test_progress_style_selects_columns(self, style, elapsed):
        adapter = RichUIAdapter({"ui": {"progress_style": style}}, console=Console(file=io.StringIO()))
        assert any(isinstance(column, TimeElapsedColumn) for column in adapter.progress.columns) is elapsed

    def test_panel_and_table_titles(self):
        adapter, output = rich_adapter()
        adapter.panel("Fixing missing imports from /repo/output.txt", "Import Fixer")
        table = adapter.table(["Type"], "Summary")
        table.add_row("Foo")
        table.render()
        text = output.getvalue()
        assert "Import Fixer" in text and "/repo/output.txt" in text
        assert "Summary" in text


class TestTqdmUIAdapter:

    def test_prompt_reads_line(self):
        output = io.StringIO()
        adapter = TqdmUIAdapter(stdin=io.StringIO("Bar\r\nBaz\n"), stdout=output)

        assert adapter.prompt("What module is Foo located in?") == "Bar"
        assert adapter.prompt("What module is Qux located in?") == "Baz"
        assert adapter.prompt("What module is Quux located in?") is None
        assert "What module is Foo located in?" in output.getvalue()

    def test_log_and_panel(self):
        output = io.StringIO()
        adapter = TqdmUIAdapter(stdin=io.StringIO(), stdout=output, width=40)

        adapter.log("Fixed /repo/A.swift", LogLevel.SUCCESS)
        adapter.panel("Fixing missing imports", "Import Fixer")

        text = output.getvalue()
        assert "Fixed /repo/A.swift" in text
        assert " Import Fixer " in text
        assert "Fixing missing imports" in text

    def test_table(self):
        output = io.StringIO()
        table = TqdmUIAdapter(stdout=output).table(["Type", "Module"])
        table.add_row("Foo", "Bar")
        table.render()
        assert "Foo  | Bar" in output.getvalue()


class TestUIService:

    def test_delegates_to_adapter(self, scripted_ui):
        adapter = scripted_ui(["Bar"])
        ui = UIService(adapter)

        ui.log("hello", LogLevel.WARNING)
        ui.panel("content", "Title")

        assert ui.prompt("Question?") == "Bar"
        assert adapter.messages == [(LogLevel.WARNING, "hello")]
        assert adapter.panels == [("Title", "content")]

    def test_falls_back_to_logging(self, caplog):
        caplog.set_level(logging.INFO, logger="import_fixer")
        ui = UIService()

        ui.log("something happened", LogLevel.ERROR)
        assert isinstance(ui.status("Scanning"), LoggedStatus)
        table = ui.table(["Type"], "Summary")
        assert isinstance(table, LoggedTable)
        table.add_row("Foo")
        table.render()

        assert "something happened" in caplog.text
        assert "Type=Foo" in caplog.text

    def test_fallback_prompt_handles_end_of_input(self, monkeypatch):
        def raise_eof(*args, **kwargs):
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)
        assert UIService().prompt("Question?") is None


@pytest.mark.parametrize("ui_type, expected", [
    ("rich", RichUIAdapter),
    ("tqdm", TqdmUIAdapter),
    ("unknown", RichUIAdapter),
])
def test_create_ui_service(ui_type, expected):
    assert isinstance(create_ui_service({"ui": {"type": ui_type}}), expected)
