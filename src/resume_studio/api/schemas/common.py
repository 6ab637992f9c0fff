"""Shared Pydantic schema base for API requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Request bodies accept camelCase keys (``versionId``) as sent by clients."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)
