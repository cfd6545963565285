"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape

from cleanpath.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def printable(message: str) -> str:
    """Make text safe for a UTF-8 stream.

    Names read from disk that are not valid UTF-8 carry lone surrogates,
    which are shown as backslash escapes.
    """
    return message.encode("utf-8", "backslashreplace").decode("utf-8")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(printable(message))}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(printable(message))}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(printable(message))}[/]")
