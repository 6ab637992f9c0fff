"""Render a document to HTML for the preview pane."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from resume_studio.api.schemas.preview import PreviewRequest
from resume_studio.models.document import ResumeDocument
from resume_studio.templates import render

router = APIRouter(prefix="/preview", tags=["preview"])


@router.post("")
def render_preview(request: PreviewRequest) -> Any:
    try:
        document = ResumeDocument.from_wire(request.data)
    except ValidationError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Invalid document"},
        )
    page = render(document)
    if request.scale is not None:
        page = page.with_scale(request.scale)
    return {"success": True, "data": page.to_html()}
