"""Schemas for the text enhancement endpoint."""

from __future__ import annotations

from enum import StrEnum

from resume_studio.api.schemas.common import RequestModel


class EnhanceAction(StrEnum):
    IMPROVE_TEXT = "improveText"
    GENERATE_CONTENT = "generateContent"


class EnhanceRequest(RequestModel):
    action: str
    text: str = ""
    context: str = ""
    topic: str = ""
