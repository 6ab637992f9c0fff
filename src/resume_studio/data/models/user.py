"""User account model.

Passwords are stored as salted PBKDF2 hashes, never in plaintext.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_studio.data.db import Base

if TYPE_CHECKING:
    from resume_studio.data.models.version import ResumeVersionRecord


class User(Base):
    """Application user account.

    Attributes:
        id: Auto-incrementing primary key.
        username: Unique handle used for login.
        password_hash: Salted hash of the user's password.
        created_at: UTC timestamp when the account was created.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    versions: Mapped[list[ResumeVersionRecord]] = relationship(
        "ResumeVersionRecord", back_populates="user", cascade="all, delete-orphan"
    )
