"""Deletion candidate selection for a single directory.

Lists the direct children of a directory and decides which of them are
deletion candidates. Nothing here descends into subdirectories; the
walker schedules those as passes of their own.
"""

import logging
from pathlib import Path

from cleanpath.cleaner.matcher import PatternMatcher
from cleanpath.cleaner.models import (
    Candidate,
    CandidateKind,
    CandidateReason,
    SelectionResult,
    failure_from_os_error,
)
from cleanpath.cleaner.transcript import Transcript

logger = logging.getLogger(__name__)


class CandidateSelector:
    """Selects file and directory candidates from one directory.

    Files are selected when they are empty or when their base name
    matches a file pattern. Directories are selected only by name, and
    only when directory patterns are configured.

    Args:
        file_matcher: Patterns applied to file base names.
        dir_matcher: Patterns applied to directory base names.
        transcript: Sink for per-entry warnings. If None, warnings only
            go to the module logger.
    """

    def __init__(
        self,
        file_matcher: PatternMatcher,
        dir_matcher: PatternMatcher,
        transcript: Transcript | None = None,
    ) -> None:
        self._file_matcher = file_matcher
        self._dir_matcher = dir_matcher
        self._transcript = transcript

    def list_entries(self, directory: Path) -> list[Path]:
        """List the direct children of a directory, sorted by name.

        Raises:
            OSError: If the directory cannot be listed.
        """
        return sorted(directory.iterdir())

    def select_file_candidates(self, directory: Path) -> SelectionResult:
        """Select the files in ``directory`` that should be deleted.

        Args:
            directory: Directory to list (not descended into).

        Returns:
            SelectionResult with file candidates in name order, or the
            listing failure.
        """
        try:
            entries = self.list_entries(directory)
        except OSError as e:
            return self._listing_failure(directory, e)

        candidates: list[Candidate] = []
        for entry in entries:
            try:
                if self._is_real_directory(entry):
                    continue
                reason = self._file_reason(entry)
            except OSError as e:
                self._warn(f"Cannot read {entry}: {e}")
                continue

            if reason is not None:
                candidates.append(Candidate(str(entry), CandidateKind.FILE, reason))

        return SelectionResult(directory=str(directory), candidates=tuple(candidates))

    def select_dir_candidates(self, directory: Path) -> SelectionResult:
        """Select the subdirectories of ``directory`` that should be deleted.

        Args:
            directory: Directory to list (not descended into).

        Returns:
            SelectionResult with directory candidates in name order, or
            the listing failure.
        """
        if not self._dir_matcher:
            return SelectionResult(directory=str(directory))

        try:
            entries = self.list_entries(directory)
        except OSError as e:
            return self._listing_failure(directory, e)

        candidates: list[Candidate] = []
        for entry in entries:
            try:
                is_dir = self._is_real_directory(entry)
            except OSError as e:
                self._warn(f"Cannot read {entry}: {e}")
                continue

            if is_dir and self._dir_matcher.matches(entry.name):
                candidates.append(
                    Candidate(str(entry), CandidateKind.DIRECTORY, CandidateReason.PATTERN_MATCH)
                )

        return SelectionResult(directory=str(directory), candidates=tuple(candidates))

    def _file_reason(self, entry: Path) -> CandidateReason | None:
        """Decide why a non-directory entry is a candidate, if it is one.

        Symlinks are not followed for sizing; a link is only selected by
        name.
        """
        if not entry.is_symlink() and entry.stat().st_size == 0:
            return CandidateReason.ZERO_BYTE
        if self._file_matcher.matches(entry.name):
            return CandidateReason.PATTERN_MATCH
        return None

    @staticmethod
    def _is_real_directory(entry: Path) -> bool:
        """Check for a directory that is not a symlink to one."""
        return entry.is_dir() and not entry.is_symlink()

    @staticmethod
    def _listing_failure(directory: Path, error: OSError) -> SelectionResult:
        logger.debug("Cannot list %s: %s", directory, error)
        return SelectionResult(
            directory=str(directory),
            failure=failure_from_os_error(error),
            error=str(error),
        )

    def _warn(self, message: str) -> None:
        logger.warning("%s", message)
        if self._transcript is not None:
            self._transcript.warning(message)
