"""Pure, immutable-update operations over ``ResumeDocument``.

Every function takes a document and returns a document; none mutates its
input.  Unmatched ids, out-of-range indices and unknown field names are
no-ops that hand back the input unchanged.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ValidationError

from resume_studio.models.document import (
    Achievement,
    Education,
    Experience,
    FormattingSettings,
    Profile,
    Project,
    ResumeDocument,
    SkillCategory,
)

logger = logging.getLogger(__name__)

__all__ = [
    "Section",
    "add_entry",
    "add_line",
    "new_entry_id",
    "remove_entry",
    "remove_line",
    "update_entry",
    "update_line",
    "update_profile",
    "update_settings",
]


class Section(StrEnum):
    """List sections of a document, named after their attribute."""

    EDUCATION = "education"
    EXPERIENCE = "experience"
    SKILLS = "skills"
    PROJECTS = "projects"
    ACHIEVEMENTS = "achievements"


_ENTRY_TYPES: dict[Section, type[BaseModel]] = {
    Section.EDUCATION: Education,
    Section.EXPERIENCE: Experience,
    Section.SKILLS: SkillCategory,
    Section.PROJECTS: Project,
    Section.ACHIEVEMENTS: Achievement,
}

# Field values for entries created by add_entry()
_NEW_ENTRY_DEFAULTS: dict[Section, dict[str, Any]] = {
    Section.EDUCATION: {"degree": "", "institution": "", "year": "", "grade": ""},
    Section.EXPERIENCE: {
        "company": "Company Name",
        "role": "Role",
        "duration": "",
        "description": ("Captured requirements...",),
    },
    Section.SKILLS: {"name": "Category", "items": ""},
    Section.PROJECTS: {"title": "New Project", "description": ("Description line 1",)},
    Section.ACHIEVEMENTS: {"description": ""},
}

_BULLET_SECTIONS = frozenset({Section.EXPERIENCE, Section.PROJECTS})


def new_entry_id(existing: Iterable[str]) -> str:
    """Return a fresh id that does not collide with any of *existing*."""
    taken = set(existing)
    while True:
        candidate = uuid.uuid4().hex
        if candidate not in taken:
            return candidate


def _resolve_field(model_cls: type[BaseModel], field: str) -> str | None:
    """Map a snake_case name or its camelCase alias to the model attribute."""
    if field in model_cls.model_fields:
        return field
    for name, info in model_cls.model_fields.items():
        if info.alias == field:
            return name
    return None


def _entries(document: ResumeDocument, section: Section) -> tuple[Any, ...]:
    return getattr(document, section.value)


def add_entry(document: ResumeDocument, section: Section | str) -> ResumeDocument:
    """Append a new entry with default values and a unique id."""
    section = Section(section)
    entries = _entries(document, section)
    entry = _ENTRY_TYPES[section](
        id=new_entry_id(e.id for e in entries),
        **_NEW_ENTRY_DEFAULTS[section],
    )
    return document.model_copy(update={section.value: (*entries, entry)})


def update_entry(
    document: ResumeDocument,
    section: Section | str,
    entry_id: str,
    field: str,
    value: Any,
) -> ResumeDocument:
    """Replace one field of the entry matching *entry_id*.

    The ``id`` field itself cannot be changed through this operation.
    """
    section = Section(section)
    name = _resolve_field(_ENTRY_TYPES[section], field)
    if name is None or name == "id":
        return document

    entries = _entries(document, section)
    if not any(e.id == entry_id for e in entries):
        return document

    if name == "description" and section in _BULLET_SECTIONS:
        value = (value,) if isinstance(value, str) else tuple(value)

    updated = tuple(
        e.model_copy(update={name: value}) if e.id == entry_id else e for e in entries
    )
    return document.model_copy(update={section.value: updated})


def remove_entry(
    document: ResumeDocument,
    section: Section | str,
    entry_id: str,
) -> ResumeDocument:
    section = Section(section)
    entries = _entries(document, section)
    remaining = tuple(e for e in entries if e.id != entry_id)
    if len(remaining) == len(entries):
        return document
    return document.model_copy(update={section.value: remaining})


# ----------------------------------------------------------------------
# Bullet lines (Experience and Project descriptions)
# ----------------------------------------------------------------------


def _edit_description(
    document: ResumeDocument,
    section: Section | str,
    entry_id: str,
    edit: Callable[[tuple[str, ...]], tuple[str, ...] | None],
) -> ResumeDocument:
    section = Section(section)
    if section not in _BULLET_SECTIONS:
        return document

    entry = next((e for e in _entries(document, section) if e.id == entry_id), None)
    if entry is None:
        return document

    description = edit(entry.description)
    if description is None:
        return document
    return update_entry(document, section, entry_id, "description", description)


def update_line(
    document: ResumeDocument,
    section: Section | str,
    entry_id: str,
    index: int,
    value: str,
) -> ResumeDocument:
    def edit(lines: tuple[str, ...]) -> tuple[str, ...] | None:
        if not 0 <= index < len(lines):
            return None
        return (*lines[:index], value, *lines[index + 1 :])

    return _edit_description(document, section, entry_id, edit)


def add_line(document: ResumeDocument, section: Section | str, entry_id: str) -> ResumeDocument:
    """Append one empty bullet line."""
    return _edit_description(document, section, entry_id, lambda lines: (*lines, ""))


def remove_line(
    document: ResumeDocument,
    section: Section | str,
    entry_id: str,
    index: int,
) -> ResumeDocument:
    def edit(lines: tuple[str, ...]) -> tuple[str, ...] | None:
        if not 0 <= index < len(lines):
            return None
        return lines[:index] + lines[index + 1 :]

    return _edit_description(document, section, entry_id, edit)


# ----------------------------------------------------------------------
# Profile and settings
# ----------------------------------------------------------------------


def update_profile(document: ResumeDocument, field: str, value: str) -> ResumeDocument:
    name = _resolve_field(Profile, field)
    if name is None:
        return document
    profile = document.profile.model_copy(update={name: value})
    return document.model_copy(update={"profile": profile})


def update_settings(document: ResumeDocument, field: str, value: Any) -> ResumeDocument:
    """Set one formatting field, starting from the defaults if settings are absent.

    The new record is re-validated, so values are clamped or coerced the same
    way stored settings are.  A value of the wrong type leaves the document
    unchanged.
    """
    name = _resolve_field(FormattingSettings, field)
    if name is None:
        return document

    current = document.effective_settings.model_dump()
    current[name] = value
    try:
        settings = FormattingSettings.model_validate(current)
    except ValidationError:
        logger.warning("Ignoring invalid value %r for setting %s", value, name)
        return document
    return document.model_copy(update={"settings": settings})
