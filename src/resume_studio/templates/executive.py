"""Executive two-column template.

Bordered header block, then a 70/30 split: Experience and Projects on the
wide left, Skills, Education and Awards on the narrow right.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.models.document import TemplateType
from resume_studio.templates.base import ResumeTemplate
from resume_studio.templates.page import Node, el

if TYPE_CHECKING:
    from resume_studio.models.document import FormattingSettings, Profile, ResumeDocument

__all__ = ["ExecutiveResumeTemplate"]

_FALLBACK_ACCENT = "#2d3748"
_BODY_TEXT = "#4b5563"
_STRONG_TEXT = "#1f2937"


class ExecutiveResumeTemplate(ResumeTemplate):
    """Header block over a wide main column and a narrow side column."""

    template_type = TemplateType.EXECUTIVE_COLUMN

    @property
    def name(self) -> str:
        return "Executive Column"

    def build_body(self, document: ResumeDocument, settings: FormattingSettings) -> Node:
        accent = self.accent(settings, _FALLBACK_ACCENT)
        lh = self.line_height(settings)
        column_style = {
            "display": "flex",
            "flex-direction": "column",
            "gap": self.mm(settings.section_spacing),
        }
        bullets_style = {"list-style-type": "disc", "margin-left": "4mm", "color": _BODY_TEXT}

        def title(text: str) -> Node:
            return el(
                "h2",
                text,
                role="section-title",
                style={
                    "font-size": "1.125rem",
                    "font-weight": "bold",
                    "text-transform": "uppercase",
                    "letter-spacing": "0.05em",
                    "color": accent,
                },
            )

        experience = self.section(
            title("Professional Experience"),
            [
                self.entry(
                    el(
                        "div",
                        self.rich(exp.company),
                        self.rich(exp.duration, style={"color": "#6b7280"}),
                        style={
                            "display": "flex",
                            "justify-content": "space-between",
                            "font-weight": "bold",
                            "color": _STRONG_TEXT,
                        },
                    ),
                    self.rich(exp.role, "div", style={"font-weight": "600"}),
                    self.bullet_list(exp.description, style=bullets_style),
                    key=exp.id,
                    style=lh,
                )
                for exp in document.experience
            ],
            key="experience",
        )

        projects = self.section(
            title("Key Projects"),
            [
                self.entry(
                    el(
                        "div",
                        self.rich(project.title),
                        self.link(project.github_link, "GitHub", style={"font-weight": "normal"})
                        if project.github_link
                        else None,
                        style={"display": "flex", "gap": "2mm", "font-weight": "bold"},
                    ),
                    self.bullet_list(project.description, style=bullets_style),
                    key=project.id,
                    style=lh,
                )
                for project in document.projects
            ],
            key="projects",
        )

        skills = self.section(
            title("Skills"),
            [
                self.entry(
                    self.rich(skill.name, "div", style={"font-weight": "bold"}),
                    self.rich(skill.items, "div", style={"color": _BODY_TEXT}),
                    key=skill.id,
                )
                for skill in document.skills
            ],
            key="skills",
        )

        education = self.section(
            title("Education"),
            [
                self.entry(
                    self.rich(edu.degree, "div", style={"font-weight": "bold"}),
                    self.rich(edu.institution, "div", style={"color": _BODY_TEXT}),
                    self.rich(edu.year, "div", style={"font-size": "0.75rem"}),
                    key=edu.id,
                )
                for edu in document.education
            ],
            key="education",
        )

        awards = self.section(
            title("Awards"),
            el(
                "ul",
                [
                    el("li", self.rich(ach.description), role="entry", data_key=ach.id)
                    for ach in document.achievements
                ],
                style=bullets_style,
            ),
            key="achievements",
        )

        columns = el(
            "div",
            el("div", experience, projects, role="main", style={"width": "70%", **column_style}),
            el("div", skills, education, awards, role="side", style={"width": "30%", **column_style}),
            role="columns",
            style={"display": "flex", "gap": "8mm"},
        )

        return el(
            "div",
            self._heading(document.profile, accent),
            columns,
            role="body",
            style=self.padding(settings),
        )

    def _heading(self, profile: Profile, accent: str | None) -> Node:
        contact: list[Node] = []
        if profile.email:
            contact.append(self.rich(profile.email))
        if profile.phone:
            contact.append(self.rich(profile.phone))
        if profile.linkedin:
            contact.append(el("span", "LinkedIn: ", self.link(profile.linkedin, profile.linkedin)))
        if profile.location:
            contact.append(self.rich(profile.location))

        return el(
            "header",
            self.rich(
                profile.full_name,
                "h1",
                role="name",
                style={"font-size": "1.875rem", "font-weight": "bold", "text-transform": "uppercase"},
            ),
            el(
                "div",
                self.join_separated(contact, "|"),
                role="contact",
                style={"display": "flex", "flex-wrap": "wrap", "gap": "2mm", "color": _BODY_TEXT},
            ),
            role="header",
            style={
                "border-bottom": f"2px solid {accent}",
                "padding-bottom": "4mm",
                "margin-bottom": "6mm",
            },
        )
