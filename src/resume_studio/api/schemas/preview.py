"""Schemas for the preview rendering endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from resume_studio.api.schemas.common import RequestModel


class PreviewRequest(RequestModel):
    data: dict[str, Any] = Field(description="Resume document in wire form")
    scale: float | None = Field(default=None, gt=0, description="Optional preview scale")
