import logging
import threading
from typing import Optional

from fastapi import FastAPI

from media_organizer.core.config.settings import Settings, settings as default_settings
from media_organizer.core.database.connection import create_db_engine, create_session_factory, init_database
from media_organizer.features.catalog.data.repository import SqlCatalogStore
from media_organizer.features.catalog.domain.interfaces import ICatalogStore
from media_organizer.features.source_scanner.service.scanner import ScanEngine
from .routes import router

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> SqlCatalogStore:
    """
    Opens (and if needed creates) the catalog database described by settings.
    """
    settings.ensure_dirs()
    logger.info(f"Opening catalog database: {settings.DATABASE_URL}")
    engine = create_db_engine(settings.DATABASE_URL)
    init_database(engine)
    return SqlCatalogStore(create_session_factory(engine))


def create_app(settings: Optional[Settings] = None, store: Optional[ICatalogStore] = None) -> FastAPI:
    """
    Builds the HTTP application around an explicitly constructed catalog store.
    Pass `store` to reuse an existing one (tests do this).
    """
    settings = settings or default_settings
    if store is None:
        store = build_store(settings)

    app = FastAPI(title="Media Organizer API", version="1.0.0")
    app.state.store = store
    app.state.scanner = ScanEngine(store)
    app.state.scan_lock = threading.Lock()

    app.include_router(router)
    return app
