"""CLI package for cleanpath.

This package contains the Typer application and all subcommands.
"""

from cleanpath.cli.main import app

__all__ = ["app"]
