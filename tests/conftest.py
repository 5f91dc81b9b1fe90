# File: tests/conftest.py

import pytest
import os
import sys
import logging

# 1. Add project root to path
sys.path.append(os.getcwd())

from media_organizer.core.database.connection import create_db_engine, create_session_factory, init_database
from media_organizer.features.catalog.data.repository import SqlCatalogStore
from media_organizer.features.source_scanner.service.scanner import ScanEngine


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Keeps SQLAlchemy quiet unless a test asks otherwise.
    """
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    yield


@pytest.fixture
def engine(tmp_path):
    """
    A fresh SQLite catalog per test. Nothing is shared between tests.
    """
    db_engine = create_db_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    init_database(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def db_session(session_factory):
    """
    Provides a session for assertions against the raw table.
    """
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(session_factory):
    return SqlCatalogStore(session_factory)


@pytest.fixture
def scanner(store):
    return ScanEngine(store)


@pytest.fixture
def media_tree(tmp_path):
    """
    Creates:
    media/
      a.mp4      (10 bytes)
      b.jpg      (20 bytes)
      c.txt      (5 bytes, not media)
      sub/d.png  (30 bytes)
    """
    root = tmp_path / "media"
    root.mkdir()
    (root / "a.mp4").write_bytes(b"v" * 10)
    (root / "b.jpg").write_bytes(b"i" * 20)
    (root / "c.txt").write_bytes(b"t" * 5)

    sub = root / "sub"
    sub.mkdir()
    (sub / "d.png").write_bytes(b"p" * 30)

    return root
