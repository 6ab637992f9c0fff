"""Response schemas for the editor option catalogs."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TemplateResponse(BaseModel):
    id: str = Field(description="Template identifier stored in settings.template")
    name: str = Field(description="Display name")


class FontResponse(BaseModel):
    name: str = Field(description="Display name")
    value: str = Field(description="CSS font-family value stored in settings.font")
