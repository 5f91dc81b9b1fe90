import logging
from pathlib import Path
from typing import Optional, Union

from media_organizer.core.common.enums import FileOutcome
from media_organizer.core.common.errors import ConstraintViolation, ScanError

# Cross-Feature Import (Scanner depends only on the Catalog contract)
from media_organizer.features.catalog.domain.interfaces import ICatalogStore
from media_organizer.features.catalog.domain.models import NewMediaRecord

from ..domain.interfaces import IFileWalker
from ..domain.models import ScanRequest, ScanSummary, WalkEntry
from ..data.file_walker import LocalFileWalker
from ..data.media_rules import MediaRules

logger = logging.getLogger(__name__)


class ScanEngine:
    """
    Walks a directory tree and inserts every new media file into the catalog.
    Re-scanning the same tree adds nothing.
    """

    def __init__(self, store: ICatalogStore, walker: Optional[IFileWalker] = None):
        self.store = store
        self.walker = walker or LocalFileWalker()

    def scan(self, root_path: Union[str, Path]) -> ScanSummary:
        """
        Scans root_path recursively.

        Returns:
            ScanSummary whose added_count is the number of new records.

        Raises:
            RootNotFoundError: root_path is missing or unreadable.
            TraversalError: a directory failed mid-walk. Records inserted
                before the failure stay in the catalog.
        """
        request = ScanRequest.from_user_path(root_path)
        summary = ScanSummary(root_path=str(request.root_path))

        logger.info(f"📂 Starting scan of: {request.root_path}")

        try:
            for entry in self.walker.walk(request.root_path):
                if entry.is_dir:
                    continue
                summary.record(self._process_entry(entry))
        except ScanError as e:
            logger.error(f"Scan of {request.root_path} aborted after {summary.added_count} new items: {e}")
            raise

        logger.info(f"✅ Scan complete. Added {summary.added_count} new items ({summary.files_seen} files seen)")
        return summary

    def _process_entry(self, entry: WalkEntry) -> FileOutcome:
        """
        Decides what happens to one file. Never raises for per-file problems.
        """
        # 1. Classify by extension
        kind = MediaRules.classify(entry.name)
        if kind is None:
            return FileOutcome.UNCLASSIFIED

        # 2. Listed but not inspectable (vanished, dangling link)
        if entry.error is not None:
            logger.warning(f"Skipping {entry.path}: {entry.error}")
            return FileOutcome.FAILED

        path = str(entry.path)

        # 3. Deduplication check
        try:
            if self.store.exists(path):
                return FileOutcome.ALREADY_CATALOGED
        except Exception as e:
            logger.warning(f"Failed to look up media item {path}: {e}")
            return FileOutcome.FAILED

        # 4. Persist
        record = NewMediaRecord(
            path=path,
            filename=entry.name,
            size=entry.size,
            media_kind=kind,
        )
        try:
            self.store.insert(record)
        except ConstraintViolation:
            return FileOutcome.ALREADY_CATALOGED
        except Exception as e:
            logger.warning(f"Failed to insert media item {path}: {e}")
            return FileOutcome.FAILED

        return FileOutcome.ADDED
