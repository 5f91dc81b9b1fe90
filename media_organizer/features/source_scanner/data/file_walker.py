import os
import stat
import logging
from pathlib import Path
from typing import Iterator
from media_organizer.core.common.errors import TransientFileError, TraversalError
from ..domain.interfaces import IFileWalker
from ..domain.models import WalkEntry

logger = logging.getLogger(__name__)


class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    Directory symlinks are not followed; file symlinks are stat'ed through.
    """

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        # Single-file root: report just that file
        if not root.is_dir():
            entry = self._file_entry(root)
            if entry is not None:
                yield entry
            return

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            base = Path(dirpath)

            for dirname in dirnames:
                yield WalkEntry(path=base / dirname, name=dirname, is_dir=True)

            for filename in filenames:
                entry = self._file_entry(base / filename)
                if entry is not None:
                    yield entry

    def _file_entry(self, path: Path):
        try:
            st = path.stat()
        except OSError as e:
            # Vanished between listing and stat, or a dangling symlink
            return WalkEntry(path=path, name=path.name, is_dir=False, error=TransientFileError(path, e))

        # FIFOs, sockets and device nodes are not media
        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        return WalkEntry(path=path, name=path.name, is_dir=False, size=st.st_size)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        # A directory removed mid-walk is not a tree-level failure
        if isinstance(error, FileNotFoundError):
            logger.debug(f"Directory vanished during walk: {error.filename}")
            return
        raise TraversalError(error.filename, error)
