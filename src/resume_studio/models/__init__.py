"""Document and version models."""

from resume_studio.models.document import (
    Achievement,
    Education,
    Experience,
    FormattingSettings,
    Profile,
    Project,
    ResumeDocument,
    SkillCategory,
    TemplateType,
)
from resume_studio.models.version import Version

__all__ = [
    "Achievement",
    "Education",
    "Experience",
    "FormattingSettings",
    "Profile",
    "Project",
    "ResumeDocument",
    "SkillCategory",
    "TemplateType",
    "Version",
]
