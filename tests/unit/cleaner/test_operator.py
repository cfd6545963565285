"""Unit tests for DeletionExecutor.

Tests deletion of files, symlinks and directory trees, deletion
records, and per-entry failure isolation.
"""

import io
from pathlib import Path
from unittest.mock import patch

from cleanpath.cleaner.models import Candidate, CandidateKind, CandidateReason, FailureKind
from cleanpath.cleaner.operator import DeletionExecutor
from cleanpath.cleaner.transcript import Transcript
from rich.console import Console


class TestDeleteFile:
    """Tests for DeletionExecutor.delete_file()."""

    def test_delete_file(self, tmp_path: Path, transcript: Transcript) -> None:
        """Deleting a file uses Path.unlink."""
        target = tmp_path / "a.txt"
        target.write_text("content")

        result = DeletionExecutor(transcript).delete_file(str(target))

        assert result.success is True
        assert result.kind == CandidateKind.FILE
        assert result.path == str(target)
        assert not target.exists()

    def test_delete_symlink_keeps_target(self, tmp_path: Path, transcript: Transcript) -> None:
        """Deleting a symlink removes the link, not the target."""
        real_file = tmp_path / "real.txt"
        real_file.write_text("content")
        link = tmp_path / "link.txt"
        link.symlink_to(real_file)

        result = DeletionExecutor(transcript).delete_file(str(link))

        assert result.success is True
        assert not link.is_symlink()
        assert real_file.exists()

    def test_delete_nonexistent_file(self, tmp_path: Path, transcript: Transcript) -> None:
        """A file that vanished is reported as NOT_FOUND."""
        result = DeletionExecutor(transcript).delete_file(str(tmp_path / "gone.txt"))

        assert result.success is False
        assert result.failure == FailureKind.NOT_FOUND
        assert result.error is not None

    def test_delete_permission_error(
        self, tmp_path: Path, console: Console, console_output: io.StringIO
    ) -> None:
        """A permission error is returned and reported, not raised."""
        target = tmp_path / "locked.txt"
        target.write_text("content")
        transcript = Transcript(console)

        with patch.object(Path, "unlink", side_effect=PermissionError("Permission denied")):
            result = DeletionExecutor(transcript).delete_file(str(target))

        assert result.success is False
        assert result.failure == FailureKind.PERMISSION_DENIED
        assert "Error deleting file" in console_output.getvalue()
        assert target.exists()

    def test_deletion_record_logged(self, tmp_path: Path, console: Console) -> None:
        """Successful deletions append a record to the log file."""
        target = tmp_path / "a.txt"
        target.write_text("")
        log = tmp_path / "run.log"

        DeletionExecutor(Transcript(console, log_path=log)).delete_file(str(target))

        assert f"Deleted File: {target}" in log.read_text()

    def test_deletion_record_hidden_unless_verbose(
        self, tmp_path: Path, console: Console, console_output: io.StringIO
    ) -> None:
        """Without verbose, deletion records stay off the console."""
        target = tmp_path / "a.txt"
        target.write_text("")

        DeletionExecutor(Transcript(console)).delete_file(str(target))

        assert "Deleted File" not in console_output.getvalue()

    def test_deletion_record_echoed_when_verbose(
        self, tmp_path: Path, console: Console, console_output: io.StringIO
    ) -> None:
        """Verbose mode echoes deletion records to the console."""
        target = tmp_path / "a.txt"
        target.write_text("")

        DeletionExecutor(Transcript(console, verbose=True)).delete_file(str(target))

        assert f"Deleted File: {target}" in console_output.getvalue()


class TestDeleteDirectory:
    """Tests for DeletionExecutor.delete_directory()."""

    def test_delete_directory_with_contents(self, tmp_path: Path, make_tree, console) -> None:
        """The whole tree goes, regardless of what the files are."""
        root = make_tree(
            tmp_path / "_svn",
            {"keep.txt": "important", "nested/deep/data.bin": "1234"},
        )
        log = tmp_path / "run.log"

        result = DeletionExecutor(Transcript(console, log_path=log)).delete_directory(str(root))

        assert result.success is True
        assert result.kind == CandidateKind.DIRECTORY
        assert not root.exists()
        assert f"Deleted Directory: {root}" in log.read_text()

    def test_delete_directory_failure(self, tmp_path: Path, transcript: Transcript) -> None:
        """rmtree errors are returned as tagged failures."""
        target = tmp_path / "dir"
        target.mkdir()

        with patch("cleanpath.cleaner.operator.shutil.rmtree", side_effect=OSError("busy")):
            result = DeletionExecutor(transcript).delete_directory(str(target))

        assert result.success is False
        assert result.failure == FailureKind.IO_ERROR
        assert result.error == "busy"


class TestDeleteBatch:
    """Tests for DeletionExecutor.delete()."""

    def test_failure_does_not_stop_batch(self, tmp_path: Path, transcript: Transcript) -> None:
        """A failing entry is reported and the rest of the batch proceeds."""
        good = tmp_path / "good.txt"
        good.write_text("")
        good_dir = tmp_path / "good_dir"
        good_dir.mkdir()
        candidates = [
            Candidate(str(good), CandidateKind.FILE, CandidateReason.ZERO_BYTE),
            Candidate(str(tmp_path / "gone"), CandidateKind.FILE, CandidateReason.PATTERN_MATCH),
            Candidate(str(good_dir), CandidateKind.DIRECTORY, CandidateReason.PATTERN_MATCH),
        ]

        results = DeletionExecutor(transcript).delete(candidates)

        assert [r.success for r in results] == [True, False, True]
        assert not good.exists()
        assert not good_dir.exists()

    def test_empty_batch(self, transcript: Transcript) -> None:
        """Deleting an empty batch returns no results."""
        assert DeletionExecutor(transcript).delete([]) == []
