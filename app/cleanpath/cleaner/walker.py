"""Cleanup run orchestration.

The walker runs one non-recursive pass over the target directory and,
for recursive runs, one more pass over every descendant directory. The
list of descendants is collected before anything is deleted; entries
that disappear in the meantime (for example below a deleted directory
candidate) fail their own pass and the walk moves on.

Within a pass, files are handled before directories:

1. select file candidates
2. confirm the file batch (safe mode only)
3. back up and delete each file
4. select directory candidates
5. confirm the directory batch (safe mode only)
6. delete each directory tree
"""

import dataclasses
import logging
import os
from pathlib import Path

from cleanpath.cleaner.backup import BackupWriter
from cleanpath.cleaner.config import CleanConfig, check_config
from cleanpath.cleaner.gate import ConfirmationGate, DecisionProvider
from cleanpath.cleaner.models import (
    ActionResult,
    Candidate,
    CandidateKind,
    DirectoryPassResult,
    FailureKind,
    RunResult,
    SelectionResult,
    WalkState,
)
from cleanpath.cleaner.operator import DeletionExecutor
from cleanpath.cleaner.selector import CandidateSelector
from cleanpath.cleaner.transcript import Transcript

logger = logging.getLogger(__name__)


class Walker:
    """Runs a complete cleanup over a target directory.

    Collaborators not passed in are built from the configuration when
    ``run`` starts.

    Args:
        config: Run configuration.
        transcript: Sink for all run output.
        decisions: Answers safe-mode confirmation prompts.
        selector: Candidate selector override.
        backup: Backup writer override (used only when a backup is wanted).
        executor: Deletion executor override.

    Attributes:
        state: Current position in the run.
    """

    def __init__(
        self,
        config: CleanConfig,
        *,
        transcript: Transcript,
        decisions: DecisionProvider,
        selector: CandidateSelector | None = None,
        backup: BackupWriter | None = None,
        executor: DeletionExecutor | None = None,
    ) -> None:
        self._config = config
        self._transcript = transcript
        self._gate = ConfirmationGate(decisions, transcript)
        self._selector = selector
        self._backup = backup
        self._executor = executor or DeletionExecutor(transcript)
        self._root = config.root_path.absolute()
        self.state = WalkState.SCANNING_TOP

    def run(self) -> RunResult:
        """Clean the target directory.

        Returns:
            Aggregated counts for the run.

        Raises:
            ConfigurationError: If the configuration is unusable. Raised
                before any directory is examined.
        """
        file_matcher, dir_matcher = check_config(self._config)
        if self._selector is None:
            self._selector = CandidateSelector(file_matcher, dir_matcher, self._transcript)
        if self._backup is None and self._config.backup_root is not None:
            self._backup = BackupWriter(self._root, self._config.backup_root)

        result = RunResult()

        descendants: list[Path] = []
        if self._config.recursive:
            self._transcript.line(
                "Loading entire directory structure. This may take a few minutes."
            )
            descendants = self.collect_descendants(self._root)
            logger.debug("Collected %d descendant directories", len(descendants))

        self.state = WalkState.SCANNING_TOP
        result.add_pass(self.process_directory(self._root))

        for directory in descendants:
            self.state = WalkState.SCANNING_DESCENDANT
            result.add_pass(self.process_directory(directory))

        self.state = WalkState.DONE
        return result

    @staticmethod
    def collect_descendants(root: Path) -> list[Path]:
        """List every directory below ``root``, parents before children.

        Symlinks to directories are left out entirely. Directories that
        cannot be read still appear in the list (their own pass reports
        the failure) but their children are unknown.

        Args:
            root: Directory to enumerate.

        Returns:
            Descendant directories, siblings sorted by name.
        """

        def _on_error(error: OSError) -> None:
            logger.debug("Cannot enumerate %s: %s", error.filename, error)

        descendants: list[Path] = []
        for dirpath, dirnames, _ in os.walk(root, onerror=_on_error):
            # Assigning in place also fixes what os.walk descends into
            dirnames[:] = sorted(
                name for name in dirnames if not os.path.islink(os.path.join(dirpath, name))
            )
            descendants.extend(Path(dirpath) / name for name in dirnames)
        return descendants

    def process_directory(self, directory: Path) -> DirectoryPassResult:
        """Run one non-recursive pass over a single directory.

        Args:
            directory: Directory to clean (its subdirectories are not visited).

        Returns:
            Results for the pass. A listing failure ends the pass early
            and is carried in the result.
        """
        if self._selector is None:
            msg = "process_directory() called before run()"
            raise RuntimeError(msg)

        result = DirectoryPassResult(directory=str(directory))
        self._transcript.detail(f"Examining directory: {directory}")

        files = self._selector.select_file_candidates(directory)
        if not files.ok:
            return self._skip_directory(result, files)

        if files.candidates:
            if self._confirmed(files.candidates, CandidateKind.FILE):
                result.files = [self._remove_file(c) for c in files.candidates]
            else:
                result.files_declined = True

        dirs = self._selector.select_dir_candidates(directory)
        if not dirs.ok:
            return self._skip_directory(result, dirs)

        if dirs.candidates:
            if self._confirmed(dirs.candidates, CandidateKind.DIRECTORY):
                result.directories = self._executor.delete(dirs.candidates)
            else:
                result.directories_declined = True

        return result

    def _confirmed(self, candidates: tuple[Candidate, ...], kind: CandidateKind) -> bool:
        if not self._config.safe:
            return True
        return self._gate.confirm(candidates, self._config.safe_limit, kind)

    def _remove_file(self, candidate: Candidate) -> ActionResult:
        """Back up (when configured) and delete one file.

        A failed backup leaves the file in place.
        """
        if self._backup is None:
            return self._executor.delete_file(candidate.path)

        copied = self._backup.backup(candidate.path)
        if copied.failed:
            self._transcript.error(f"{copied.error}; not deleting {candidate.path}")
            return copied

        deleted = self._executor.delete_file(candidate.path)
        return dataclasses.replace(deleted, backup_path=copied.backup_path)

    def _skip_directory(
        self,
        result: DirectoryPassResult,
        selection: SelectionResult,
    ) -> DirectoryPassResult:
        if selection.failure == FailureKind.PERMISSION_DENIED:
            message = f"Skipping folder due to permission issues: {selection.directory}"
        else:
            message = f"Skipping folder due to exception: {selection.directory}"
        self._transcript.error(f"{message} ({selection.error})")

        result.failure = selection.failure
        result.error = selection.error
        return result
