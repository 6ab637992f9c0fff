"""Typed, serializable resume document.

Every model is a frozen pydantic model: edits never mutate a value, they
produce a new one (see ``resume_studio.services.editing``).  Field names are
snake_case in Python and camelCase on the wire (``fullName``,
``marginTop``, ``githubLink``) so stored documents keep their original shape.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from resume_studio.constants.fonts import DEFAULT_FONT, is_allowed_font
from resume_studio.constants.layout import NEUTRAL_ACCENT

__all__ = [
    "Achievement",
    "DocumentModel",
    "Education",
    "Experience",
    "FormattingSettings",
    "Profile",
    "Project",
    "ResumeDocument",
    "SkillCategory",
    "TemplateType",
]


class TemplateType(StrEnum):
    """The five page-layout grammars."""

    ADMIN_CLASSICAL = "ADMIN_CLASSICAL"
    MODERN_SIDEBAR = "MODERN_SIDEBAR"
    MINIMALIST = "MINIMALIST"
    EXECUTIVE_COLUMN = "EXECUTIVE_COLUMN"
    CREATIVE_HEADER = "CREATIVE_HEADER"

    @classmethod
    def coerce(cls, value: Any) -> TemplateType:
        """Return the member for *value*, or ``ADMIN_CLASSICAL`` if unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return cls.ADMIN_CLASSICAL


class DocumentModel(BaseModel):
    """Shared configuration for all document models."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class Profile(DocumentModel):
    """Identity and contact details.

    Link fields hold bare ``domain/path`` values; the renderer prepends
    ``https://``.
    """

    full_name: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str | None = None
    github: str | None = None
    leetcode: str | None = None
    website: str | None = None
    location: str | None = None


class Education(DocumentModel):
    id: str
    degree: str = ""
    institution: str = ""
    year: str = ""
    grade: str = ""


class Experience(DocumentModel):
    id: str
    company: str = ""
    role: str = ""
    duration: str = ""
    location: str | None = None
    description: tuple[str, ...] = ()


class SkillCategory(DocumentModel):
    id: str
    name: str = ""
    items: str = ""


class Project(DocumentModel):
    id: str
    title: str = ""
    github_link: str | None = None
    demo_link: str | None = None
    description: tuple[str, ...] = ()


class Achievement(DocumentModel):
    id: str
    description: str = ""


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class FormattingSettings(DocumentModel):
    """Page formatting choices.

    Out-of-range numbers are clamped and unknown template or font values
    resolve to the defaults instead of failing validation.
    """

    margin_top: int = 12
    margin_right: int = 15
    margin_bottom: int = 12
    margin_left: int = 15
    line_height: float = 1.4
    section_spacing: int = 5
    template: TemplateType = TemplateType.ADMIN_CLASSICAL
    font: str = DEFAULT_FONT
    background_color: str = "#FFFFFF"
    accent_color: str = NEUTRAL_ACCENT

    @field_validator("margin_top", "margin_right", "margin_bottom", "margin_left")
    @classmethod
    def _clamp_margin(cls, value: int) -> int:
        return int(_clamp(value, 0, 50))

    @field_validator("line_height")
    @classmethod
    def _clamp_line_height(cls, value: float) -> float:
        return _clamp(value, 1.0, 2.0)

    @field_validator("section_spacing")
    @classmethod
    def _clamp_section_spacing(cls, value: int) -> int:
        return int(_clamp(value, 0, 20))

    @field_validator("template", mode="before")
    @classmethod
    def _coerce_template(cls, value: Any) -> TemplateType:
        return TemplateType.coerce(value)

    @field_validator("font", mode="before")
    @classmethod
    def _coerce_font(cls, value: Any) -> str:
        if isinstance(value, str) and is_allowed_font(value):
            return value
        return DEFAULT_FONT


class ResumeDocument(DocumentModel):
    """All resume content plus its (optional) formatting settings.

    ``settings`` may be absent on the wire; consumers must use
    :attr:`effective_settings`, which substitutes the full default record.
    """

    profile: Profile = Field(default_factory=Profile)
    education: tuple[Education, ...] = ()
    experience: tuple[Experience, ...] = ()
    skills: tuple[SkillCategory, ...] = ()
    projects: tuple[Project, ...] = ()
    achievements: tuple[Achievement, ...] = ()
    settings: FormattingSettings | None = None

    @property
    def effective_settings(self) -> FormattingSettings:
        if self.settings is None:
            return FormattingSettings()
        return self.settings

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready, camelCase representation used for storage."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> ResumeDocument:
        return cls.model_validate(payload)
