"""Deletion of selected files and directory trees.

Each deletion is isolated: a failure is reported and returned as a
result, and the caller moves on to the next candidate.
"""

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from cleanpath.cleaner.models import (
    ActionResult,
    Candidate,
    CandidateKind,
    failure_from_os_error,
)
from cleanpath.cleaner.transcript import Transcript

logger = logging.getLogger(__name__)


class DeletionExecutor:
    """Deletes files and directories and records each deletion.

    Successful deletions are recorded as ``Deleted File: <path>`` or
    ``Deleted Directory: <path>``; failures are reported as error lines.

    Args:
        transcript: Sink for deletion records and errors.
    """

    def __init__(self, transcript: Transcript) -> None:
        self._transcript = transcript

    def delete_file(self, path: str) -> ActionResult:
        """Delete a single file or symlink.

        Args:
            path: File to delete.

        Returns:
            ActionResult indicating success or failure.
        """
        self._transcript.detail(f"Deleting file: {path}")
        try:
            Path(path).unlink()
        except OSError as e:
            return self._failure(path, CandidateKind.FILE, e)

        self._transcript.deletion(f"Deleted File: {path}")
        return ActionResult(path=path, kind=CandidateKind.FILE, success=True)

    def delete_directory(self, path: str) -> ActionResult:
        """Delete a directory and everything beneath it.

        The contents are removed unconditionally; file patterns do not
        apply inside a selected directory.

        Args:
            path: Directory to delete.

        Returns:
            ActionResult indicating success or failure.
        """
        self._transcript.detail(
            f"Deleting directory (including all files and child folders): {path}"
        )
        try:
            shutil.rmtree(path)
        except OSError as e:
            return self._failure(path, CandidateKind.DIRECTORY, e)

        self._transcript.deletion(f"Deleted Directory: {path}")
        return ActionResult(path=path, kind=CandidateKind.DIRECTORY, success=True)

    def delete(self, candidates: Sequence[Candidate]) -> list[ActionResult]:
        """Delete a batch of candidates and return results.

        Args:
            candidates: Candidates to delete, in order.

        Returns:
            List of ActionResult, one per candidate.
        """
        results: list[ActionResult] = []
        for candidate in candidates:
            if candidate.is_directory:
                results.append(self.delete_directory(candidate.path))
            else:
                results.append(self.delete_file(candidate.path))
        return results

    def _failure(self, path: str, kind: CandidateKind, error: OSError) -> ActionResult:
        label = "file" if kind == CandidateKind.FILE else "directory"
        logger.debug("Failed to delete %s %s: %s", label, path, error)
        self._transcript.error(f"Error deleting {label} {path} ({error})")
        return ActionResult(
            path=path,
            kind=kind,
            success=False,
            failure=failure_from_os_error(error),
            error=str(error),
        )
