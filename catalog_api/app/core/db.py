"""
SQLAlchemy database integration.

This module owns the declarative ``Base`` for ORM models, builds the
engine and session factory lazily from ``settings.database_url`` and
creates the tables on application start (``init_db``).  Schema
migrations are out of scope: ``create_all`` only adds missing tables.

Sessions are created with ``expire_on_commit=False`` so that entities
returned by a repository stay readable after their session closes.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_ENGINE: Optional[Engine] = None
_SESSION_FACTORY: Optional[sessionmaker] = None


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``.

    SQLite connections are shared across FastAPI's worker threads, so
    the same-thread check is disabled and a busy timeout is applied so
    concurrent writers wait for the lock instead of failing.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": settings.db_timeout}
    return create_engine(database_url, echo=settings.debug, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory bound to ``engine``."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_engine() -> Engine:
    """Lazily create and return the application engine."""
    global _ENGINE
    if _ENGINE is None:
        _ENGINE = build_engine(settings.database_url)
    return _ENGINE


def get_session_factory() -> sessionmaker:
    """Lazily create and return the application session factory."""
    global _SESSION_FACTORY
    if _SESSION_FACTORY is None:
        _SESSION_FACTORY = build_session_factory(get_engine())
    return _SESSION_FACTORY


def init_db(engine: Optional[Engine] = None) -> None:
    """Create all tables registered on ``Base``.

    Parameters
    ----------
    engine : Optional[Engine]
        Engine to create the tables on.  Defaults to the application
        engine built from ``settings.database_url``.
    """
    # Import models so their tables are registered on Base.metadata.
    from catalog_api.app.models import product  # noqa: F401

    engine = engine or get_engine()
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error("Error creating database tables: %s", e)
        raise
    logger.info("Database tables ready on %s", engine.url.render_as_string(hide_password=True))
