"""Database connection and session management."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url

_IN_MEMORY_SQLITE = ("sqlite://", "sqlite:///:memory:")


def _engine_options(url: str) -> dict:
    """Build create_engine() keyword arguments for the configured backend."""
    if settings.is_sqlite:
        # FastAPI runs sync handlers in a threadpool; SQLite must allow that
        options = {"connect_args": {"check_same_thread": False}}
        if url in _IN_MEMORY_SQLITE:
            # One shared connection, otherwise every session sees an empty DB
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,   # Verify connections before using them
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
    }


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create base class for models
Base = declarative_base()


def init_db() -> None:
    """Create any missing tables. Existing tables are left untouched."""
    # Import models so they are registered on Base.metadata
    from db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database initialised", extra={"dialect": engine.dialect.name})
