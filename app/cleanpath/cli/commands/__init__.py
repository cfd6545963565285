"""CLI commands for cleanpath.

This package contains all subcommand implementations.
"""

from cleanpath.cli.commands import clean, config

__all__ = ["clean", "config"]
