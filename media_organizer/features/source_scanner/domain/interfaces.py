from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator
from .models import WalkEntry


class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts os.walk from the scan logic.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[WalkEntry]:
        """
        Yields every directory and regular file reachable from root.
        Per-file problems are reported on the entry itself (entry.error).

        Raises:
            TraversalError: If a directory cannot be enumerated.
        """
        pass
