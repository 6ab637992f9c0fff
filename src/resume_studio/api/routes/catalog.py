"""Option catalogs for the editor's template and font pickers."""

from __future__ import annotations

from fastapi import APIRouter

from resume_studio.api.schemas.catalog import FontResponse, TemplateResponse
from resume_studio.constants.fonts import AVAILABLE_FONTS
from resume_studio.templates import get_template, list_templates

router = APIRouter(tags=["catalog"])


@router.get("/templates", response_model=list[TemplateResponse])
def list_template_options() -> list[TemplateResponse]:
    """List the layouts in declaration order."""
    return [
        TemplateResponse(id=template.value, name=get_template(template).name)
        for template in list_templates()
    ]


@router.get("/fonts", response_model=list[FontResponse])
def list_font_options() -> list[FontResponse]:
    """List the allow-listed fonts; the first entry is the default."""
    return [FontResponse(name=option.name, value=option.value) for option in AVAILABLE_FONTS]
