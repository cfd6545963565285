"""Pre-deletion backup of files.

Copies each file into the backup root at the same path it had relative
to the cleaned directory, so the backup tree mirrors the target tree.
"""

import logging
import shutil
from pathlib import Path

from cleanpath.cleaner.models import ActionResult, CandidateKind, FailureKind

logger = logging.getLogger(__name__)


class BackupWriter:
    """Mirrors files from a source root into a backup root.

    Args:
        source_root: Directory being cleaned; backup paths are relative to it.
        backup_root: Directory receiving the copies.
    """

    def __init__(self, source_root: Path, backup_root: Path) -> None:
        self._source_root = source_root.resolve()
        self._backup_root = backup_root.resolve()

    def destination_for(self, path: str) -> Path:
        """Compute the backup location of a file.

        Args:
            path: File inside the source root.

        Returns:
            Mirrored path under the backup root.

        Raises:
            ValueError: If the file is not inside the source root.
        """
        source = Path(path)
        # Resolve the parent only, so a symlinked file keeps its own name
        relative = (source.parent.resolve() / source.name).relative_to(self._source_root)
        return self._backup_root / relative

    def backup(self, path: str) -> ActionResult:
        """Copy a file to its mirrored backup location.

        Missing parent directories are created and an existing copy at the
        destination is overwritten.

        Args:
            path: File to back up.

        Returns:
            ActionResult with ``backup_path`` on success, or a
            BACKUP_FAILED result.
        """
        try:
            dest = self.destination_for(path)
        except ValueError:
            return ActionResult(
                path=path,
                kind=CandidateKind.FILE,
                success=False,
                failure=FailureKind.BACKUP_FAILED,
                error=f"Backup failed: {path} is outside {self._source_root}",
            )

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            # Copying a link recreates it, which cannot overwrite in place
            if Path(path).is_symlink() and (dest.exists() or dest.is_symlink()):
                dest.unlink()
            shutil.copy2(path, dest, follow_symlinks=False)
        except OSError as e:
            logger.warning("Backup failed for %s: %s", path, e)
            return ActionResult(
                path=path,
                kind=CandidateKind.FILE,
                success=False,
                failure=FailureKind.BACKUP_FAILED,
                error=f"Backup failed: {e}",
            )

        logger.debug("Backed up %s to %s", path, dest)
        return ActionResult(
            path=path,
            kind=CandidateKind.FILE,
            success=True,
            backup_path=str(dest),
        )
