"""Fatal configuration errors.

These are raised before any traversal begins and abort the run with
nothing deleted. Per-file and per-directory problems are never raised;
they travel as result values (see ``cleanpath.cleaner.models``).
"""


class ConfigurationError(Exception):
    """Base exception for errors that prevent a cleanup run from starting."""


class TargetNotFoundError(ConfigurationError):
    """Raised when the target directory does not exist or is not a directory."""


class BackupConflictError(ConfigurationError):
    """Raised when the backup directory equals or lies inside the target."""


class InvalidPatternError(ConfigurationError):
    """Raised when a match pattern is not a valid regular expression."""
