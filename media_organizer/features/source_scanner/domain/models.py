import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
from media_organizer.core.common.enums import FileOutcome
from media_organizer.core.common.errors import RootNotFoundError, TransientFileError


@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to scan a directory (or a single file).
    """
    root_path: Path

    def __post_init__(self):
        if not self.root_path.exists():
            raise RootNotFoundError(self.root_path)
        # A directory must be listable and traversable, a file must be readable
        mode = os.R_OK | os.X_OK if self.root_path.is_dir() else os.R_OK
        if not os.access(self.root_path, mode):
            raise RootNotFoundError(self.root_path, reason="not accessible")

    @classmethod
    def from_user_path(cls, raw: "str | os.PathLike") -> "ScanRequest":
        """Expands '~' and makes the path absolute without resolving symlinks."""
        return cls(Path(os.path.abspath(os.path.expanduser(os.fspath(raw)))))


@dataclass(frozen=True)
class WalkEntry:
    """
    One node reported by a file walker.
    `error` is set when the node was listed but could not be inspected.
    """
    path: Path
    name: str
    is_dir: bool
    size: int = 0
    error: Optional[TransientFileError] = None


@dataclass
class ScanSummary:
    """
    Report returned after scanning completes.
    """
    root_path: str = ""
    added_count: int = 0
    files_seen: int = 0
    outcomes: Dict[FileOutcome, int] = field(default_factory=lambda: {o: 0 for o in FileOutcome})

    def record(self, outcome: FileOutcome) -> None:
        self.files_seen += 1
        self.outcomes[outcome] += 1
        if outcome is FileOutcome.ADDED:
            self.added_count += 1

    @property
    def skipped_count(self) -> int:
        return self.files_seen - self.added_count
