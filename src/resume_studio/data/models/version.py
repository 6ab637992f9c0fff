"""Stored resume version.

``public_id`` is the token handed to clients; ``id`` stays internal.
``data`` holds the document in its camelCase wire form.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_studio.data.db import Base

if TYPE_CHECKING:
    from resume_studio.data.models.user import User


class ResumeVersionRecord(Base):
    """A named snapshot of a resume document owned by one user.

    Attributes:
        id: Auto-incrementing primary key.
        public_id: Unique client-visible identifier.
        name: User-chosen label.
        timestamp: Last write instant in epoch milliseconds.
        data: Document payload (JSON).
        owner: Username of the owning account.
    """

    __tablename__ = "resume_versions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    public_id: Mapped[str] = mapped_column(String(32), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    owner: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped[User] = relationship("User", back_populates="versions")
