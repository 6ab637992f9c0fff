"""Database configuration and session management.

This module provides SQLAlchemy 2.x ORM infrastructure including:
- An explicitly constructed :class:`Database` resource (engine + session factory)
- Table creation when the resource is opened
- A context manager for transactional session usage

The database URL can be overridden via the DB_URL environment variable.
Defaults to sqlite:///<project_root>/database.db for local persistence.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""


def get_database_url() -> str:
    """Return the database URL, allowing overrides via environment variable."""
    env_url = os.getenv("DB_URL")
    if env_url:
        return env_url

    project_root = Path(__file__).resolve().parents[3]
    db_path = project_root / "database.db"
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


class Database:
    """Persistence resource with an explicit open/close lifecycle.

    Construct once per process (or per test), call :meth:`open` before use and
    :meth:`close` at shutdown. Sessions are only available while open.
    """

    def __init__(self, url: str | None = None) -> None:
        self.url = url or get_database_url()
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> Database:
        """Create the engine and any missing tables. Idempotent."""
        if self._engine is not None:
            return self

        # Import ORM models so their metadata is registered on Base before create_all.
        from resume_studio.data import models  # noqa: F401

        self._engine = create_engine(self.url, echo=False, future=True)
        Base.metadata.create_all(bind=self._engine)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Opened database %s", self._engine.url.render_as_string(hide_password=True))
        return self

    def close(self) -> None:
        """Dispose of the engine and its connection pool."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Closed database")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional scope around a series of operations."""
        if self._session_factory is None:
            raise RuntimeError("Database is not open")
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
