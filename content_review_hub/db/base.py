"""
Database engine and session handling.

The engine is built on first use from DATABASE_URL (or the configured
default), so importing the package never opens a connection. Route handlers
get one session per request through ``get_db``; the CLI opens its own from
``get_session_local``.
"""

import os
from typing import Generator, Optional

import structlog
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = structlog.get_logger()


class Base(DeclarativeBase):
    """Declarative base for the content review tables."""

    pass


# Async drivers and the synchronous driver used in their place
_SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg",
    "postgresql+aiopg": "postgresql+psycopg",
    "sqlite+aiosqlite": "sqlite",
}

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _sync_url(url: URL) -> URL:
    replacement = _SYNC_DRIVERS.get(url.drivername)
    return url.set(drivername=replacement) if replacement else url


def get_database_url(raw_url: Optional[str] = None) -> str:
    """Resolve the database URL: argument, then DATABASE_URL, then settings.

    Async driver names are swapped for their synchronous counterparts, since
    both the ORM and Alembic run synchronously.
    """
    from ..config import get_settings

    url = make_url(raw_url or os.getenv("DATABASE_URL") or get_settings().database_url)
    # str(url) would mask the password with ***
    return _sync_url(url).render_as_string(hide_password=False)


def _build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        # One shared connection keeps in-memory databases alive between sessions
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first call."""
    global _engine
    if _engine is None:
        _engine = _build_engine(get_database_url())
        logger.debug("database_engine_created", dialect=_engine.dialect.name)
    return _engine


def get_session_local() -> sessionmaker:
    """Return the session factory bound to the engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _session_factory


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding a request-scoped session."""
    db = get_session_local()()
    try:
        yield db
    finally:
        db.close()


def init_database() -> None:
    """Create any missing content review tables."""
    # Register every model with Base.metadata
    from . import audit_models, models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
    logger.info("database_initialized", tables=sorted(Base.metadata.tables))
