"""Settings file for cleanpath defaults.

The settings file provides default values for ``cleanpath clean``
options. Values given on the command line always take precedence.

Settings are stored in ~/.config/cleanpath/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cleanpath.core.paths import get_settings_path

logger = logging.getLogger(__name__)

DEFAULT_SAFE_LIMIT = 15


class CleanSettings(BaseModel):
    """Default options for cleanup runs.

    Attributes:
        safe_limit: Number of candidates shown in a safe-mode preview.
        matches: Regular expressions selecting files for deletion.
        dir_matches: Regular expressions selecting directories for deletion.
        logfile: Log file that receives the run transcript.
        backup: Directory receiving copies of files before deletion.
        recursive: Descend into subdirectories by default.
        safe: Ask for confirmation before each batch by default.
        verbose: Echo deletion records to the console by default.
    """

    model_config = ConfigDict(extra="forbid")

    safe_limit: Annotated[
        int,
        Field(ge=0, description="Candidates shown in a safe-mode preview"),
    ] = DEFAULT_SAFE_LIMIT
    matches: Annotated[
        list[str],
        Field(default_factory=list, description="File name patterns"),
    ]
    dir_matches: Annotated[
        list[str],
        Field(default_factory=list, description="Directory name patterns"),
    ]
    logfile: Annotated[Path | None, Field(description="Transcript log file")] = None
    backup: Annotated[Path | None, Field(description="Backup directory")] = None
    recursive: bool = False
    safe: bool = False
    verbose: bool = False


class SettingsError(Exception):
    """Raised when the settings file cannot be read, parsed or validated."""


def load_settings(path: Path | None = None) -> CleanSettings:
    """Load settings from a TOML file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated CleanSettings object.

    Raises:
        SettingsError: If the file is unreadable, not valid TOML, or
            doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return CleanSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings file {settings_path}: {e}") from e

    try:
        return CleanSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e


def save_settings(settings: CleanSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The settings to save.
        path: Destination path. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(_settings_to_dict(settings), f)
        os.replace(tmp_path, settings_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings file: {e}") from e

    return settings_path


def _settings_to_dict(settings: CleanSettings) -> dict[str, object]:
    """Convert settings to a dictionary for TOML serialization.

    TOML has no null value, so unset paths are left out.
    """
    result: dict[str, object] = {
        "safe_limit": settings.safe_limit,
        "matches": list(settings.matches),
        "dir_matches": list(settings.dir_matches),
        "recursive": settings.recursive,
        "safe": settings.safe,
        "verbose": settings.verbose,
    }
    if settings.logfile is not None:
        result["logfile"] = str(settings.logfile)
    if settings.backup is not None:
        result["backup"] = str(settings.backup)
    return result
