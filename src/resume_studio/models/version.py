"""A named, timestamped snapshot of a document under an account."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from resume_studio.models.document import ResumeDocument

__all__ = ["Version"]


class Version(BaseModel):
    """Persisted unit returned by the persistence gateway.

    Attributes:
        id: Client-visible token, distinct from the database primary key.
        name: User-chosen label.
        timestamp: Creation/update instant in epoch milliseconds.
        data: The stored document.
        owner: Username that owns the version.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    timestamp: int
    data: ResumeDocument
    owner: str

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
