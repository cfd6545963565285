"""Cleanup domain models.

This module defines the data structures passed between the cleanup
components: deletion candidates, per-entry action results, per-directory
pass results, and the aggregated run result.
"""

from dataclasses import dataclass, field
from enum import Enum


class CandidateKind(str, Enum):
    """Kind of filesystem entry selected for deletion.

    Attributes:
        FILE: Regular file, symlink, or any other non-directory entry.
        DIRECTORY: Real directory (never a symlink), removed with its contents.
    """

    FILE = "file"
    DIRECTORY = "directory"


class CandidateReason(str, Enum):
    """Why an entry was selected for deletion.

    Attributes:
        ZERO_BYTE: The file is empty.
        PATTERN_MATCH: The entry's base name matched a configured pattern.
    """

    ZERO_BYTE = "zero_byte"
    PATTERN_MATCH = "pattern_match"


class FailureKind(str, Enum):
    """Classification of a recoverable failure.

    Attributes:
        PERMISSION_DENIED: The operating system refused access.
        NOT_FOUND: The entry vanished or was never there.
        BACKUP_FAILED: The pre-deletion copy could not be written.
        IO_ERROR: Any other operating system error.
    """

    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    BACKUP_FAILED = "backup_failed"
    IO_ERROR = "io_error"


class WalkState(str, Enum):
    """Position of the walker in a cleanup run."""

    SCANNING_TOP = "scanning_top"
    SCANNING_DESCENDANT = "scanning_descendant"
    DONE = "done"


def failure_from_os_error(error: OSError) -> FailureKind:
    """Map an OSError to the failure kind reported for it."""
    if isinstance(error, PermissionError):
        return FailureKind.PERMISSION_DENIED
    if isinstance(error, (FileNotFoundError, NotADirectoryError)):
        return FailureKind.NOT_FOUND
    return FailureKind.IO_ERROR


@dataclass(frozen=True, slots=True)
class Candidate:
    """A filesystem entry eligible for deletion in the current pass.

    Attributes:
        path: Absolute path of the entry.
        kind: Whether the entry is deleted as a file or as a directory tree.
        reason: Why the entry was selected.
    """

    path: str
    kind: CandidateKind
    reason: CandidateReason

    def __post_init__(self) -> None:
        """Validate candidate data after initialization."""
        if not self.path:
            msg = "Candidate path cannot be empty"
            raise ValueError(msg)

    @property
    def is_file(self) -> bool:
        """Check if this candidate is deleted as a file."""
        return self.kind == CandidateKind.FILE

    @property
    def is_directory(self) -> bool:
        """Check if this candidate is deleted as a directory tree."""
        return self.kind == CandidateKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of a single backup or deletion.

    Attributes:
        path: Absolute path that was operated on.
        kind: Kind of entry that was operated on.
        success: Whether the operation completed successfully.
        failure: Failure classification if the operation failed.
        error: Error message if the operation failed, None otherwise.
        backup_path: Location of the backup copy, if one was written.
    """

    path: str
    kind: CandidateKind
    success: bool
    failure: FailureKind | None = None
    error: str | None = None
    backup_path: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the operation failed."""
        return not self.success


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Candidates selected from one directory listing.

    A listing failure is carried in ``failure``/``error`` and leaves
    ``candidates`` empty.
    """

    directory: str
    candidates: tuple[Candidate, ...] = ()
    failure: FailureKind | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Check if the directory could be listed."""
        return self.failure is None


@dataclass(slots=True)
class DirectoryPassResult:
    """Outcome of one non-recursive pass over a single directory.

    Attributes:
        directory: Directory that was processed.
        files: Results for file candidates, in processing order.
        directories: Results for directory candidates, in processing order.
        files_declined: The file batch was declined at the safe-mode prompt.
        directories_declined: The directory batch was declined at the prompt.
        failure: Set when the directory itself could not be listed.
        error: Message for ``failure``.
    """

    directory: str
    files: list[ActionResult] = field(default_factory=list)
    directories: list[ActionResult] = field(default_factory=list)
    files_declined: bool = False
    directories_declined: bool = False
    failure: FailureKind | None = None
    error: str | None = None

    @property
    def skipped(self) -> bool:
        """Check if the pass was aborted by a listing failure."""
        return self.failure is not None

    @property
    def error_count(self) -> int:
        """Number of failures recorded during this pass."""
        failed = sum(1 for r in self.files if r.failed)
        failed += sum(1 for r in self.directories if r.failed)
        return failed + (1 if self.skipped else 0)


@dataclass(slots=True)
class RunResult:
    """Aggregated counts for a complete cleanup run."""

    files_deleted: int = 0
    directories_deleted: int = 0
    errors: int = 0
    directories_scanned: int = 0
    batches_declined: int = 0
    failed_paths: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if the run finished without any recoverable errors."""
        return self.errors == 0

    def add_error(self, path: str) -> None:
        """Count a failure that happened outside a directory pass."""
        self.errors += 1
        self.failed_paths.append(path)

    def add_pass(self, result: DirectoryPassResult) -> None:
        """Fold one directory pass into the run totals.

        Deletions made before a pass was cut short still count.
        """
        if result.skipped:
            self.add_error(result.directory)
        else:
            self.directories_scanned += 1

        self.files_deleted += sum(1 for r in result.files if r.success)
        self.directories_deleted += sum(1 for r in result.directories if r.success)
        self.batches_declined += int(result.files_declined) + int(result.directories_declined)
        for r in (*result.files, *result.directories):
            if r.failed:
                self.add_error(r.path)
