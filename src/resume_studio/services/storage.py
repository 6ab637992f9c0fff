"""Persistence gateway for accounts and resume versions.

Gateway operations never raise into callers: database errors are logged and
converted to ``False`` / ``None`` / ``[]``.
"""

from __future__ import annotations

import logging
import time
import uuid
from abc import ABC, abstractmethod

from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from resume_studio.constants.defaults import INITIAL_RESUME_DATA
from resume_studio.data.db import Database
from resume_studio.data.models import ResumeVersionRecord
from resume_studio.models.document import ResumeDocument
from resume_studio.models.version import Version
from resume_studio.services.auth import (
    authenticate_user,
    create_user,
    find_user,
    normalize_username,
)

logger = logging.getLogger(__name__)

__all__ = ["INITIAL_VERSION_NAME", "PersistenceGateway", "SqlPersistenceGateway"]

INITIAL_VERSION_NAME = "Initial Draft"


def _now_millis() -> int:
    return int(time.time() * 1000)


class PersistenceGateway(ABC):
    """Account and version storage as seen by the editing surface."""

    @abstractmethod
    def register(self, username: str, password: str) -> bool:
        """Create an account seeded with one sample version."""

    @abstractmethod
    def login(self, username: str, password: str) -> bool:
        """Return True if the credentials match an account."""

    @abstractmethod
    def list_versions(self, username: str) -> list[Version]:
        """Return the user's versions, newest first."""

    @abstractmethod
    def create_version(
        self, username: str, name: str | None, document: ResumeDocument
    ) -> Version | None:
        """Store a new version; a blank name defaults to ``Version N+1``."""

    @abstractmethod
    def update_version(
        self, username: str, version_id: str, name: str | None, document: ResumeDocument
    ) -> Version | None:
        """Overwrite an owned version; None if no such version.

        A ``None`` name keeps the stored name.
        """

    @abstractmethod
    def delete_version(self, username: str, version_id: str) -> bool:
        """Delete an owned version; True only if exactly one was removed."""


class SqlPersistenceGateway(PersistenceGateway):
    """:class:`PersistenceGateway` backed by a SQLAlchemy :class:`Database`.

    Usernames are normalised with :func:`normalize_username` on entry to every
    operation, so an account is addressed the same way for login and storage.
    """

    def __init__(self, database: Database) -> None:
        self.database = database
        self.last_error: str | None = None

    @staticmethod
    def _to_version(record: ResumeVersionRecord) -> Version:
        return Version(
            id=record.public_id,
            name=record.name,
            timestamp=record.timestamp,
            data=ResumeDocument.from_wire(record.data),
            owner=record.owner,
        )

    def user_exists(self, username: str) -> bool:
        try:
            with self.database.session() as session:
                return find_user(session, normalize_username(username)) is not None
        except SQLAlchemyError:
            logger.exception("Failed to look up user %s", username)
            return False

    def register(self, username: str, password: str) -> bool:
        username = normalize_username(username)
        self.last_error = None
        try:
            with self.database.session() as session:
                user, error = create_user(session, username, password)
                if user is None:
                    self.last_error = error
                    logger.info("Registration refused for %r: %s", username, error)
                    return False
                session.add(
                    ResumeVersionRecord(
                        public_id=uuid.uuid4().hex,
                        name=INITIAL_VERSION_NAME,
                        timestamp=_now_millis(),
                        data=INITIAL_RESUME_DATA.to_wire(),
                        owner=user.username,
                    )
                )
        except SQLAlchemyError as exc:
            self.last_error = f"Failed to create user: {exc}"
            logger.exception("Failed to register %s", username)
            return False
        return True

    def login(self, username: str, password: str) -> bool:
        username = normalize_username(username)
        try:
            with self.database.session() as session:
                return authenticate_user(session, username, password)
        except SQLAlchemyError:
            logger.exception("Login failed for %s", username)
            return False

    def list_versions(self, username: str) -> list[Version]:
        username = normalize_username(username)
        try:
            with self.database.session() as session:
                records = session.scalars(
                    select(ResumeVersionRecord)
                    .where(ResumeVersionRecord.owner == username)
                    .order_by(ResumeVersionRecord.timestamp.desc(), ResumeVersionRecord.id.desc())
                ).all()
                versions = []
                for record in records:
                    try:
                        versions.append(self._to_version(record))
                    except ValidationError:
                        logger.warning(
                            "Skipping unreadable version %s for %s",
                            record.public_id,
                            username,
                            exc_info=True,
                        )
                return versions
        except SQLAlchemyError:
            logger.exception("Failed to list versions for %s", username)
            return []

    def create_version(
        self, username: str, name: str | None, document: ResumeDocument
    ) -> Version | None:
        username = normalize_username(username)
        try:
            with self.database.session() as session:
                if find_user(session, username) is None:
                    logger.warning("Refusing to save a version for unknown user %s", username)
                    return None
                if not name:
                    count = session.scalar(
                        select(func.count())
                        .select_from(ResumeVersionRecord)
                        .where(ResumeVersionRecord.owner == username)
                    )
                    name = f"Version {(count or 0) + 1}"
                record = ResumeVersionRecord(
                    public_id=uuid.uuid4().hex,
                    name=name,
                    timestamp=_now_millis(),
                    data=document.to_wire(),
                    owner=username,
                )
                session.add(record)
                session.flush()
                return self._to_version(record)
        except (SQLAlchemyError, ValidationError):
            logger.exception("Failed to save a new version for %s", username)
            return None

    def update_version(
        self, username: str, version_id: str, name: str | None, document: ResumeDocument
    ) -> Version | None:
        username = normalize_username(username)
        try:
            with self.database.session() as session:
                record = session.scalars(
                    select(ResumeVersionRecord).where(
                        ResumeVersionRecord.public_id == version_id,
                        ResumeVersionRecord.owner == username,
                    )
                ).first()
                if record is None:
                    return None
                if name is not None:
                    record.name = name
                record.data = document.to_wire()
                record.timestamp = max(_now_millis(), record.timestamp)
                session.flush()
                return self._to_version(record)
        except (SQLAlchemyError, ValidationError):
            logger.exception("Failed to update version %s for %s", version_id, username)
            return None

    def delete_version(self, username: str, version_id: str) -> bool:
        username = normalize_username(username)
        try:
            with self.database.session() as session:
                record = session.scalars(
                    select(ResumeVersionRecord).where(
                        ResumeVersionRecord.public_id == version_id,
                        ResumeVersionRecord.owner == username,
                    )
                ).first()
                if record is None:
                    return False
                session.delete(record)
        except SQLAlchemyError:
            logger.exception("Failed to delete version %s for %s", version_id, username)
            return False
        return True
