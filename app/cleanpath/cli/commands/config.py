"""Settings file commands.

Shows the effective defaults for ``cleanpath clean`` and creates a
settings file to edit.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from cleanpath.core.paths import get_settings_path
from cleanpath.core.settings import (
    CleanSettings,
    SettingsError,
    load_settings,
    save_settings,
)
from cleanpath.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and create the settings file.",
    no_args_is_help=True,
)


@app.command()
def show(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file to read."),
    ] = None,
) -> None:
    """Show the effective default settings."""
    path = config_path or get_settings_path()
    try:
        settings = load_settings(path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    source = str(path) if path.exists() else f"{path} (not found, using defaults)"
    table = Table(
        title="Settings",
        caption=escape(source),
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    table.add_row("safe_limit", str(settings.safe_limit))
    table.add_row("matches", escape(", ".join(settings.matches)) or "-")
    table.add_row("dir_matches", escape(", ".join(settings.dir_matches)) or "-")
    table.add_row("recursive", str(settings.recursive))
    table.add_row("safe", str(settings.safe))
    table.add_row("verbose", str(settings.verbose))
    table.add_row("logfile", escape(str(settings.logfile)) if settings.logfile else "-")
    table.add_row("backup", escape(str(settings.backup)) if settings.backup else "-")

    console.print(table)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file to create."),
    ] = None,
) -> None:
    """Write a settings file with default values."""
    path = config_path or get_settings_path()
    if path.exists() and not force:
        print_info(f"Settings file already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(CleanSettings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
