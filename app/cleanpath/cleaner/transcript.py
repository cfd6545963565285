"""Run transcript: console output mirrored into an optional log file.

Every cleanup component reports through a Transcript instance handed
to it at construction time. Console lines go through Rich; log lines
are plain text prefixed with an ISO 8601 UTC timestamp and appended to
the log file as they happen.
"""

import logging
from datetime import UTC, datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from cleanpath.utils.formatting import printable

logger = logging.getLogger(__name__)


class Transcript:
    """Console and log-file sink for a cleanup run.

    Channels:
        line: Progress output, always shown and logged.
        detail: Verbose-only progress output, logged only when shown.
        deletion: Deletion records, always logged, shown when verbose.
        note: Log-only lines, such as answers to confirmation prompts.
        warning / error: Shown on stderr and logged.

    Args:
        console: Console for regular output.
        err_console: Console for warnings and errors.
        log_path: File receiving transcript lines, or None for no log.
        verbose: Whether verbose-only output is shown.
    """

    def __init__(
        self,
        console: Console,
        err_console: Console | None = None,
        *,
        log_path: Path | None = None,
        verbose: bool = False,
    ) -> None:
        self._console = console
        self._err_console = err_console or console
        self._log_path = log_path
        self._verbose = verbose
        self._log_failed = False

    @property
    def log_path(self) -> Path | None:
        """Log file path, or None when the log is disabled."""
        return None if self._log_failed else self._log_path

    def line(self, message: str = "", style: str | None = None) -> None:
        """Show and log a progress line."""
        self._show(message, style)
        self._log(message)

    def detail(self, message: str, style: str | None = "muted") -> None:
        """Show and log a line in verbose mode only."""
        if self._verbose:
            self.line(message, style)

    def deletion(self, message: str) -> None:
        """Record a deletion; always logged, echoed to the console when verbose."""
        if self._verbose:
            self._show(message, "deleted")
        self._log(message)

    def note(self, message: str) -> None:
        """Write a line to the log file only."""
        self._log(message)

    def warning(self, message: str) -> None:
        """Report a recoverable problem."""
        self._err_console.print(f"[warning]Warning:[/] {escape(printable(message))}")
        self._log(f"Warning: {message}")

    def error(self, message: str) -> None:
        """Report a failure."""
        self._err_console.print(f"[error]Error:[/] {escape(printable(message))}")
        self._log(f"Error: {message}")

    def _show(self, message: str, style: str | None) -> None:
        if style:
            self._console.print(f"[{style}]{escape(printable(message))}[/]")
        else:
            self._console.print(escape(printable(message)))

    def _log(self, message: str) -> None:
        """Append a timestamped line to the log file.

        A write failure disables the log for the rest of the run and is
        reported once; the cleanup itself continues.
        """
        if self._log_path is None or self._log_failed:
            return

        timestamp = datetime.now(UTC).isoformat(timespec="seconds")
        try:
            with open(self._log_path, "a", encoding="utf-8", errors="backslashreplace") as f:
                f.write(f"{timestamp} {message}\n")
        except OSError as e:
            self._log_failed = True
            logger.warning("Cannot write log file %s: %s", self._log_path, e)
            self._err_console.print(
                f"[warning]Warning:[/] Log file disabled, cannot write "
                f"{escape(printable(str(self._log_path)))}: {escape(printable(str(e)))}"
            )
