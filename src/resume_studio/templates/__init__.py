"""Template registry and the render entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.models.document import TemplateType
from resume_studio.templates.base import ResumeTemplate
from resume_studio.templates.classical import ClassicalResumeTemplate
from resume_studio.templates.creative import CreativeResumeTemplate
from resume_studio.templates.executive import ExecutiveResumeTemplate
from resume_studio.templates.minimalist import MinimalistResumeTemplate
from resume_studio.templates.page import Node, PageTree
from resume_studio.templates.sidebar import SidebarResumeTemplate

if TYPE_CHECKING:
    from resume_studio.models.document import ResumeDocument

__all__ = [
    "Node",
    "PageTree",
    "ResumeTemplate",
    "get_template",
    "list_templates",
    "render",
]

_REGISTRY: dict[TemplateType, ResumeTemplate] = {
    TemplateType.ADMIN_CLASSICAL: ClassicalResumeTemplate(),
    TemplateType.MODERN_SIDEBAR: SidebarResumeTemplate(),
    TemplateType.MINIMALIST: MinimalistResumeTemplate(),
    TemplateType.EXECUTIVE_COLUMN: ExecutiveResumeTemplate(),
    TemplateType.CREATIVE_HEADER: CreativeResumeTemplate(),
}

_missing = set(TemplateType) - set(_REGISTRY)
if _missing:  # pragma: no cover
    raise RuntimeError(f"No template registered for: {sorted(_missing)}")


def get_template(template: TemplateType | str | None) -> ResumeTemplate:
    """Return the template for *template*.

    Unset or unrecognised values resolve to the classical template.
    """
    return _REGISTRY[TemplateType.coerce(template)]


def list_templates() -> list[TemplateType]:
    """Return all template identifiers in declaration order."""
    return list(TemplateType)


def render(document: ResumeDocument) -> PageTree:
    """Render *document* with the template named in its settings."""
    return get_template(document.effective_settings.template).build(document)
