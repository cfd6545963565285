"""Unit tests for the shared console helpers."""

import io

import pytest
from cleanpath.core.theme import get_theme
from cleanpath.utils import formatting
from rich.console import Console


@pytest.fixture
def outputs(monkeypatch: pytest.MonkeyPatch) -> tuple[io.StringIO, io.StringIO]:
    """Swap the shared consoles for buffered ones."""
    out, err = io.StringIO(), io.StringIO()
    monkeypatch.setattr(
        formatting, "console", Console(file=out, theme=get_theme(), width=200, color_system=None)
    )
    monkeypatch.setattr(
        formatting, "err_console", Console(file=err, theme=get_theme(), width=200, color_system=None)
    )
    return out, err


class TestPrintHelpers:
    """Tests for print_info/print_success/print_error."""

    def test_info_and_success_to_stdout(self, outputs: tuple[io.StringIO, io.StringIO]) -> None:
        """Informational messages use the regular console."""
        out, err = outputs

        formatting.print_info("hello")
        formatting.print_success("done")

        assert "hello" in out.getvalue()
        assert "done" in out.getvalue()
        assert err.getvalue() == ""

    def test_error_to_stderr(self, outputs: tuple[io.StringIO, io.StringIO]) -> None:
        """Errors go to the error console with a prefix."""
        out, err = outputs

        formatting.print_error("broken")

        assert "Error: broken" in err.getvalue()
        assert out.getvalue() == ""

    def test_markup_is_escaped(self, outputs: tuple[io.StringIO, io.StringIO]) -> None:
        """Regular expressions with brackets print literally."""
        out, _ = outputs

        formatting.print_info("pattern [0-9]+ and [bold]x[/bold]")

        assert "pattern [0-9]+ and [bold]x[/bold]" in out.getvalue()
