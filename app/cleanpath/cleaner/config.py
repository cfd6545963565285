"""Run configuration and pre-flight checks.

CleanConfig is built once from command-line options and settings, then
handed to the walker unchanged. ``check_config`` performs every check
whose failure must stop the run before anything is deleted.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from cleanpath.cleaner.errors import BackupConflictError, TargetNotFoundError
from cleanpath.cleaner.matcher import PatternMatcher
from cleanpath.core.settings import DEFAULT_SAFE_LIMIT


class CleanConfig(BaseModel):
    """Immutable configuration of a cleanup run.

    Attributes:
        root_path: Directory to clean.
        file_patterns: Regular expressions selecting files by base name.
        dir_patterns: Regular expressions selecting directories by base name.
        recursive: Also clean every descendant directory.
        safe: Ask for confirmation before each batch.
        safe_limit: Number of candidates shown in a confirmation preview.
        log_path: File receiving the run transcript.
        backup_root: Directory receiving file copies before deletion.
        verbose: Show detailed progress and deletion records on the console.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_path: Path
    file_patterns: tuple[str, ...] = ()
    dir_patterns: tuple[str, ...] = ()
    recursive: bool = False
    safe: bool = False
    safe_limit: Annotated[int, Field(ge=0)] = DEFAULT_SAFE_LIMIT
    log_path: Path | None = None
    backup_root: Path | None = None
    verbose: bool = False


def backup_conflicts(root_path: Path, backup_root: Path) -> bool:
    """Check whether the backup root equals or lies inside the root path."""
    root = root_path.resolve()
    backup = backup_root.resolve()
    return backup == root or backup.is_relative_to(root)


def check_config(config: CleanConfig) -> tuple[PatternMatcher, PatternMatcher]:
    """Validate a configuration before any traversal begins.

    Args:
        config: Configuration to check.

    Returns:
        Compiled (file, directory) pattern matchers.

    Raises:
        TargetNotFoundError: If the root path is missing or not a directory.
        BackupConflictError: If the backup root equals or is inside the root.
        InvalidPatternError: If any pattern fails to compile.
    """
    if not config.root_path.is_dir():
        msg = f"The target directory does not exist: {config.root_path}"
        raise TargetNotFoundError(msg)

    if config.backup_root is not None and backup_conflicts(config.root_path, config.backup_root):
        msg = (
            f"The backup folder path conflicts with the folder being cleaned: "
            f"{config.backup_root}"
        )
        raise BackupConflictError(msg)

    return PatternMatcher(config.file_patterns), PatternMatcher(config.dir_patterns)
