import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from media_organizer.core.common.enums import MediaKind
from media_organizer.core.common.errors import ConstraintViolation
from .sql_models import MediaModel
from ..domain.interfaces import ICatalogStore
from ..domain.models import CatalogStats, MediaRecord, NewMediaRecord

logger = logging.getLogger(__name__)


class SqlCatalogStore(ICatalogStore):
    """
    SQLAlchemy-backed catalog. Works against SQLite (default) or Postgres.
    Each call opens its own short-lived session from the injected factory.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def close(self) -> None:
        """Releases the pooled connections of the engine behind the session factory."""
        engine = self.session_factory.kw.get("bind")
        if engine is not None:
            engine.dispose()

    def exists(self, path: str) -> bool:
        with self.session_factory() as db:
            hit = db.query(MediaModel.id).filter(MediaModel.path == path).first()
            return hit is not None

    def insert(self, record: NewMediaRecord) -> int:
        """
        Transactional insert. The unique index on `path` is the backstop
        against duplicates that slip past an `exists` check.
        """
        with self.session_factory() as db:
            try:
                row = MediaModel(
                    path=record.path,
                    filename=record.filename,
                    size=record.size,
                    media_kind=record.media_kind,
                    created_at=record.created_at,
                )
                db.add(row)
                db.commit()
                return row.id
            except IntegrityError:
                db.rollback()
                logger.debug(f"Duplicate path rejected: {record.path}")
                raise ConstraintViolation(record.path)
            except Exception:
                db.rollback()
                raise

    def list_all(self, kind: Optional[MediaKind] = None) -> List[MediaRecord]:
        with self.session_factory() as db:
            query = db.query(MediaModel)
            if kind is not None:
                query = query.filter(MediaModel.media_kind == MediaKind(kind))

            # Same-second inserts are common in a scan; id breaks the tie
            rows = query.order_by(MediaModel.created_at.desc(), MediaModel.id.desc()).all()
            return [self._to_record(row) for row in rows]

    def count_by_kind(self) -> CatalogStats:
        with self.session_factory() as db:
            grouped = (
                db.query(MediaModel.media_kind, func.count(MediaModel.id))
                .group_by(MediaModel.media_kind)
                .all()
            )

        counts = {MediaKind(kind): count for kind, count in grouped}
        video = counts.get(MediaKind.VIDEO, 0)
        image = counts.get(MediaKind.IMAGE, 0)
        return CatalogStats(total=video + image, video=video, image=image)

    @staticmethod
    def _to_record(row: MediaModel) -> MediaRecord:
        return MediaRecord(
            id=row.id,
            path=row.path,
            filename=row.filename,
            size=row.size,
            media_kind=MediaKind(row.media_kind),
            created_at=row.created_at,
        )
