"""Integration tests for complete cleanup runs.

These tests drive the walker end to end on real directory trees,
covering zero-byte selection, backups, safe-mode confirmation and the
run transcript.
"""

import io
from pathlib import Path

from cleanpath.cleaner import CleanConfig, ScriptedDecisions, Transcript, Walker
from cleanpath.cli.main import app
from rich.console import Console
from typer.testing import CliRunner

runner = CliRunner()


def _run(config: CleanConfig, console: Console, answers: list[str] | None = None):  # type: ignore[no-untyped-def]
    transcript = Transcript(console, log_path=config.log_path, verbose=config.verbose)
    return Walker(config, transcript=transcript, decisions=ScriptedDecisions(answers or [])).run()


class TestCleanupScenarios:
    """End-to-end cleanup runs."""

    def test_zero_byte_and_log_pattern(self, tmp_path: Path, make_tree, console: Console) -> None:
        """Empty files and *.log files go, other content stays."""
        root = make_tree(tmp_path / "T", {"a.txt": "", "b.log": "entry", "c.txt": "0123456789"})

        result = _run(CleanConfig(root_path=root, file_patterns=(r"\.log$",)), console)

        assert sorted(p.name for p in root.iterdir()) == ["c.txt"]
        assert result.files_deleted == 2
        assert result.success

    def test_backup_mirror(self, tmp_path: Path, make_tree, console: Console) -> None:
        """Backups mirror paths relative to the cleaned root."""
        root = make_tree(tmp_path / "T", {"a.txt": "", "b.log": "entry"})
        backup = tmp_path / "B"
        config = CleanConfig(root_path=root, file_patterns=(r"\.log$",), backup_root=backup)

        _run(config, console)

        assert (backup / "a.txt").read_text() == ""
        assert (backup / "b.log").read_text() == "entry"
        assert not (root / "a.txt").exists()
        assert not (root / "b.log").exists()

    def test_safe_mode_decline_then_accept(
        self, tmp_path: Path, make_tree, console: Console, console_output: io.StringIO
    ) -> None:
        """Declining keeps all three files, accepting deletes all three."""
        layout = {"x1.log": "1", "x2.log": "2", "x3.log": "3"}
        root = make_tree(tmp_path / "T", layout)
        config = CleanConfig(root_path=root, file_patterns=(r"\.log$",), safe=True, safe_limit=1)

        declined = _run(config, console, ["N"])

        assert declined.files_deleted == 0
        assert len(list(root.iterdir())) == 3
        output = console_output.getvalue()
        assert str(root / "x1.log") in output
        assert str(root / "x2.log") not in output
        assert "... and 2 more" in output

        accepted = _run(config, console, ["y"])

        assert accepted.files_deleted == 3
        assert list(root.iterdir()) == []

    def test_recursive_with_directory_patterns(
        self, tmp_path: Path, make_tree, console: Console
    ) -> None:
        """A recursive run removes matching folders at every depth."""
        root = make_tree(
            tmp_path / "OLD",
            {
                "site/_gsdata_/cache.bin": "x",
                "site/index.html": "<html/>",
                "site/.svn/entries": "x",
                "site/img/_gsdata_/thumbs.db": "x",
                "site/img/blank.gif": "",
            },
        )
        config = CleanConfig(
            root_path=root,
            file_patterns=(r"(\.svn|_svn)$",),
            dir_patterns=(r"^_gsdata_$", r"^\.svn$"),
            recursive=True,
        )

        result = _run(config, console)

        remaining = sorted(p.relative_to(root).as_posix() for p in root.rglob("*"))
        assert remaining == ["site", "site/img", "site/index.html"]
        assert result.files_deleted == 1
        assert result.directories_deleted == 3

    def test_transcript_log(self, tmp_path: Path, make_tree, console: Console) -> None:
        """The log file holds every deletion with a timestamp."""
        root = make_tree(tmp_path / "T", {"a.txt": "", "sub/b.txt": ""})
        log = tmp_path / "clean.log"
        config = CleanConfig(root_path=root, recursive=True, log_path=log)

        _run(config, console)

        lines = log.read_text().splitlines()
        assert any(line.endswith(f"Deleted File: {root / 'a.txt'}") for line in lines)
        assert any(line.endswith(f"Deleted File: {root / 'sub' / 'b.txt'}") for line in lines)
        assert any("Loading entire directory structure" in line for line in lines)


class TestCommandLine:
    """End-to-end runs through the command line."""

    def test_full_run(self, tmp_path: Path, make_tree, monkeypatch) -> None:  # type: ignore[no-untyped-def]
        """A safe, recursive, logged, backed-up run from the CLI."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        root = make_tree(
            tmp_path / "OLD",
            {"a.txt": "", "keep.txt": "k", "_svn/entries": "x", "deep/old.bak": "b"},
        )
        backup = tmp_path / "OLD_BAK"
        log = tmp_path / "old.log"

        result = runner.invoke(
            app,
            [
                "clean",
                "-t", str(root),
                "-m", r"\.bak$",
                "-d", "^_svn$",
                "-R",
                "--safe",
                "--logfile", str(log),
                "--backup", str(backup),
            ],
            # root files, root directories, then deep/ files
            input="y\ny\ny\n",
        )

        # _svn was collected up front and deleted in the root pass
        assert result.exit_code == 1, result.output
        assert sorted(p.relative_to(root).as_posix() for p in root.rglob("*")) == [
            "deep",
            "keep.txt",
        ]
        assert (backup / "a.txt").exists()
        assert (backup / "deep" / "old.bak").read_text() == "b"
        assert "Deleted Directory" in log.read_text()
