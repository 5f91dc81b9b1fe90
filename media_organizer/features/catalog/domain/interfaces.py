from abc import ABC, abstractmethod
from typing import List, Optional
from media_organizer.core.common.enums import MediaKind
from .models import CatalogStats, MediaRecord, NewMediaRecord


class ICatalogStore(ABC):
    """
    Contract for durable, deduplicated persistence of media records.
    The absolute path is the natural key.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """True iff a record with exactly this path is cataloged."""
        pass

    @abstractmethod
    def insert(self, record: NewMediaRecord) -> int:
        """
        Adds a new record and returns its id.

        Raises:
            ConstraintViolation: If the path is already cataloged.
        """
        pass

    @abstractmethod
    def list_all(self, kind: Optional[MediaKind] = None) -> List[MediaRecord]:
        """All records, newest first, optionally restricted to one kind."""
        pass

    @abstractmethod
    def count_by_kind(self) -> CatalogStats:
        pass
