"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from cleanpath import __version__
from cleanpath.cli.commands import clean, config

# Create main Typer app
app = typer.Typer(
    name="cleanpath",
    help="Delete zero-byte files and files or directories matching regular expressions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"cleanpath version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """cleanpath - automated directory cleanup.

    Deletes zero-byte files by default, plus files and directories whose
    names match the given regular expressions, optionally recursively,
    with backups and confirmation prompts.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register commands
app.add_typer(clean.app, name="clean")
app.add_typer(config.app, name="config")
