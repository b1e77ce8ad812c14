"""
Pytest fixtures for testing
"""
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from lifeos.infrastructure.db.session import Base
from lifeos.infrastructure.db import models  # noqa: F401  (registers tables)
from lifeos.config import Settings


@pytest.fixture
def db_engine():
    """
    In-memory SQLite engine for tests

    StaticPool + check_same_thread=False: TestClient runs sync routes in a
    worker thread and every connection must see the same in-memory database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Session:
    """Create database session for tests"""
    SessionLocal = sessionmaker(bind=db_engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def settings():
    """Settings independent of the developer's environment / .env"""
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite:///:memory:",
        TIMEZONE="UTC",
        ALL_TIME_RANGE_YEARS=2,
        TRACK_STATS_CHECK_LIFECYCLE=False,
    )


@pytest.fixture
def today():
    """Fixed 'today' for tests that depend on the current day"""
    return date(2024, 1, 15)
