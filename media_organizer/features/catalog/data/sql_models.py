from datetime import timezone
from sqlalchemy import Column, Integer, String, BigInteger, DateTime, Enum as SQLEnum
from sqlalchemy.types import TypeDecorator
from media_organizer.core.database.base import Base
from media_organizer.core.common.enums import MediaKind
from ..domain.models import utc_now


class UTCDateTime(TypeDecorator):
    """
    Timestamp column that always comes back timezone-aware.
    SQLite drops the offset on write, so values are normalized to UTC going in
    and UTC is reattached to naive values coming out.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class MediaModel(Base):
    __tablename__ = "media"

    id = Column(Integer, primary_key=True, autoincrement=True)
    path = Column(String, nullable=False, unique=True)
    filename = Column(String, nullable=False)
    size = Column(BigInteger, nullable=False)
    # Stored as "video"/"image" rather than the enum member names
    media_kind = Column(
        SQLEnum(MediaKind, name="media_kind", values_callable=lambda kinds: [k.value for k in kinds]),
        nullable=False,
        index=True,
    )
    created_at = Column(UTCDateTime(), nullable=False, default=utc_now)
