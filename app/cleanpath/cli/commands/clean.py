"""Cleanup command.

Deletes zero-byte files and files or directories whose names match the
given regular expressions, in the target directory and (with -R) every
directory below it.
"""

from pathlib import Path
from typing import Annotated

import typer

from cleanpath.cleaner.config import CleanConfig
from cleanpath.cleaner.errors import ConfigurationError
from cleanpath.cleaner.gate import ConsoleDecisions
from cleanpath.cleaner.matcher import split_pattern_list
from cleanpath.cleaner.transcript import Transcript
from cleanpath.cleaner.walker import Walker
from cleanpath.cli.display import create_summary_table, print_run_summary
from cleanpath.core.settings import CleanSettings, SettingsError, load_settings
from cleanpath.utils.formatting import console, err_console, print_error, print_info

app = typer.Typer(
    name="clean",
    help="Delete empty and matching files and directories.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean(
    ctx: typer.Context,
    target_dir: Annotated[
        Path | None,
        typer.Option(
            "--target-dir",
            "-t",
            help="Directory to clean. Defaults to the current directory.",
        ),
    ] = None,
    matches: Annotated[
        list[str] | None,
        typer.Option(
            "--matches",
            "-m",
            help="Regular expression(s) selecting files for deletion (repeatable, comma-separated).",
        ),
    ] = None,
    dir_matches: Annotated[
        list[str] | None,
        typer.Option(
            "--dir-matches",
            "-d",
            help="Regular expression(s) selecting directories for deletion.",
        ),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-R", help="Also clean every subdirectory."),
    ] = False,
    safe: Annotated[
        bool,
        typer.Option("--safe", help="Ask for confirmation before each batch of deletions."),
    ] = False,
    safe_limit: Annotated[
        int | None,
        typer.Option(
            "--safe-limit",
            min=0,
            help="Number of candidates previewed in safe mode. Default is 15.",
        ),
    ] = None,
    logfile: Annotated[
        Path | None,
        typer.Option("--logfile", "-l", help="Append the run transcript to this file."),
    ] = None,
    backup: Annotated[
        Path | None,
        typer.Option("--backup", "-b", help="Copy files here before deleting them."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed progress and deletions."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file to read defaults from."),
    ] = None,
) -> None:
    """Delete zero-byte files and files/directories matching patterns.

    Examples:
        cleanpath clean -t ./build -m '\\.log$' -R
        cleanpath clean -t G:/OLD -m '(\\.svn|_svn)$' -d '^_gsdata_$' -R --safe \\
            --logfile old.log --backup G:/OLD_BAK
    """
    try:
        settings = load_settings(config_path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    global_verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    config = _build_config(
        settings,
        target_dir=target_dir,
        matches=matches,
        dir_matches=dir_matches,
        recursive=recursive,
        safe=safe,
        safe_limit=safe_limit,
        logfile=logfile,
        backup=backup,
        verbose=verbose or global_verbose,
    )

    transcript = Transcript(
        console,
        err_console,
        log_path=config.log_path,
        verbose=config.verbose,
    )
    _describe_config(transcript, config)

    walker = Walker(config, transcript=transcript, decisions=ConsoleDecisions(console))
    try:
        result = walker.run()
    except ConfigurationError as e:
        transcript.note(f"Error: {e}")
        print_error(str(e))
        raise typer.Exit(code=2) from e

    console.print()
    console.print(create_summary_table(result))
    print_run_summary(result)
    if transcript.log_path is not None:
        print_info(f"Log written to {transcript.log_path}")

    if not result.success:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _build_config(
    settings: CleanSettings,
    *,
    target_dir: Path | None,
    matches: list[str] | None,
    dir_matches: list[str] | None,
    recursive: bool,
    safe: bool,
    safe_limit: int | None,
    logfile: Path | None,
    backup: Path | None,
    verbose: bool,
) -> CleanConfig:
    """Merge command-line options over settings-file defaults."""
    file_patterns = split_pattern_list(matches) if matches else settings.matches
    dir_patterns = split_pattern_list(dir_matches) if dir_matches else settings.dir_matches

    return CleanConfig(
        root_path=target_dir if target_dir is not None else Path.cwd(),
        file_patterns=tuple(file_patterns),
        dir_patterns=tuple(dir_patterns),
        recursive=recursive or settings.recursive,
        safe=safe or settings.safe,
        safe_limit=safe_limit if safe_limit is not None else settings.safe_limit,
        log_path=logfile if logfile is not None else settings.logfile,
        backup_root=backup if backup is not None else settings.backup,
        verbose=verbose or settings.verbose,
    )


def _describe_config(transcript: Transcript, config: CleanConfig) -> None:
    """Echo the effective options in verbose mode."""
    transcript.detail(f" - Target directory: {config.root_path}")
    if config.file_patterns:
        transcript.detail(f" - File matches: {', '.join(config.file_patterns)} + zero-byte files")
    if config.dir_patterns:
        transcript.detail(f" - Directory matches: {', '.join(config.dir_patterns)}")
    if config.recursive:
        transcript.detail(" - Recursive")
    if config.safe:
        transcript.detail(f" - Safe mode, previewing up to {config.safe_limit} entries per batch")
    if config.log_path is not None:
        transcript.detail(f" - Logfile: {config.log_path}")
    if config.backup_root is not None:
        transcript.detail(f" - Backup: {config.backup_root}")
