# File: media_organizer/core/database/connection.py

import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy_utils import create_database, database_exists

from .base import Base

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Builds an engine for the given URL. The caller owns it."""
    # check_same_thread=False lets the API threadpool share SQLite connections
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_database(engine: Engine) -> None:
    """
    Creates the database (if missing) and the catalog schema.
    Idempotent: existing tables and indexes are left untouched.
    """
    if not database_exists(engine.url):
        create_database(engine.url)

    # Import models so they are registered on Base.metadata
    import media_organizer.features.catalog.data.sql_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized successfully")