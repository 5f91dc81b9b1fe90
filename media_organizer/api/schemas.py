from datetime import datetime

from pydantic import BaseModel

from media_organizer.core.common.enums import MediaKind
from media_organizer.features.catalog.domain.models import CatalogStats, MediaRecord


class MediaItem(BaseModel):
    id: int
    path: str
    filename: str
    size: int
    type: MediaKind
    created_at: datetime

    @classmethod
    def from_record(cls, record: MediaRecord) -> "MediaItem":
        return cls(
            id=record.id,
            path=record.path,
            filename=record.filename,
            size=record.size,
            type=record.media_kind,
            created_at=record.created_at,
        )


class ScanRequestBody(BaseModel):
    path: str = ""


class ScanResponse(BaseModel):
    success: bool
    count: int
    message: str


class StatsResponse(BaseModel):
    total: int
    video: int
    image: int

    @classmethod
    def from_stats(cls, stats: CatalogStats) -> "StatsResponse":
        return cls(total=stats.total, video=stats.video, image=stats.image)
