"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from cleanpath.cleaner.transcript import Transcript
from cleanpath.core.theme import get_rich_theme
from rich.console import Console

TreeBuilder = Callable[[Path, dict[str, str | None]], Path]


@pytest.fixture
def console_output() -> io.StringIO:
    """Buffer capturing everything printed to the test console."""
    return io.StringIO()


@pytest.fixture
def console(console_output: io.StringIO) -> Console:
    """Wide, colorless console writing into ``console_output``."""
    return Console(
        file=console_output,
        theme=get_rich_theme(),
        width=1000,
        color_system=None,
    )


@pytest.fixture
def transcript(console: Console) -> Transcript:
    """Non-verbose transcript without a log file."""
    return Transcript(console)


@pytest.fixture
def make_tree() -> TreeBuilder:
    """Create files and directories below a root.

    Keys are relative paths. A string value is written as file content
    (``""`` makes a zero-byte file); None creates a directory.
    """

    def _make(root: Path, layout: dict[str, str | None]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in layout.items():
            path = root / relative
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content)
        return root

    return _make
