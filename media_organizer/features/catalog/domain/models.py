from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict
from media_organizer.core.common.enums import MediaKind


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class NewMediaRecord:
    """
    A classified file about to be inserted into the catalog.
    The store assigns the id.
    """
    path: str
    filename: str
    size: int
    media_kind: MediaKind
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        if not self.path:
            raise ValueError("Media path cannot be empty.")
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.size}")


@dataclass(frozen=True)
class MediaRecord:
    """
    Represents one indexed file as stored in the catalog.
    """
    id: int
    path: str
    filename: str
    size: int
    media_kind: MediaKind
    created_at: datetime


@dataclass(frozen=True)
class CatalogStats:
    """
    Aggregate counts computed directly from the stored rows.
    """
    total: int = 0
    video: int = 0
    image: int = 0

    @property
    def by_kind(self) -> Dict[MediaKind, int]:
        return {MediaKind.VIDEO: self.video, MediaKind.IMAGE: self.image}
