"""Creative header template.

A full-bleed header block in reversed colours (white on accent), then a
single-column body: skills, a timeline-styled experience section with one
coloured marker per entry, and an Education/Projects split where Projects
shows at most the first two entries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.models.document import TemplateType
from resume_studio.templates.base import ResumeTemplate
from resume_studio.templates.page import Node, el

if TYPE_CHECKING:
    from resume_studio.models.document import FormattingSettings, Profile, ResumeDocument

__all__ = ["CreativeResumeTemplate"]

_FALLBACK_ACCENT = "#7c3aed"
_MAX_PROJECTS = 2


class CreativeResumeTemplate(ResumeTemplate):
    """Colour header block over a timeline body."""

    template_type = TemplateType.CREATIVE_HEADER

    @property
    def name(self) -> str:
        return "Creative Header"

    def build_body(self, document: ResumeDocument, settings: FormattingSettings) -> Node:
        accent = self.accent(settings, _FALLBACK_ACCENT)
        lh = self.line_height(settings)

        def title(text: str) -> Node:
            return el(
                "div",
                el(
                    "div",
                    role="title-bar",
                    style={"height": "1mm", "width": "8mm", "background-color": accent},
                ),
                el(
                    "h2",
                    text,
                    role="section-title",
                    style={
                        "font-size": "1.125rem",
                        "font-weight": "bold",
                        "text-transform": "uppercase",
                        "color": "#1f2937",
                    },
                ),
                style={"display": "flex", "align-items": "center", "gap": "3mm"},
            )

        skills = self.section(
            title("Technical Skills"),
            [
                self.entry(
                    el("span", self.rich(skill.name), ":", style={"font-weight": "bold"}),
                    self.rich(skill.items, style={"color": "#4b5563"}),
                    key=skill.id,
                    style={"display": "flex", "gap": "2mm", **lh},
                )
                for skill in document.skills
            ],
            key="skills",
        )

        timeline = el(
            "div",
            [
                self.entry(
                    el(
                        "div",
                        role="timeline-dot",
                        style={
                            "position": "absolute",
                            "left": "-2.4mm",
                            "top": "2mm",
                            "width": "4mm",
                            "height": "4mm",
                            "border-radius": "50%",
                            "border": "1mm solid #ffffff",
                            "background-color": accent,
                        },
                    ),
                    el(
                        "div",
                        self.rich(exp.company, "h3", style={"font-weight": "bold"}),
                        self.rich(exp.duration, style={"color": "#9ca3af"}),
                        style={"display": "flex", "justify-content": "space-between"},
                    ),
                    self.rich(exp.role, "div", style={"color": accent}),
                    self.bullet_list(
                        exp.description,
                        style={"list-style-type": "none", "color": "#4b5563"},
                        marker="-",
                    ),
                    key=exp.id,
                    style={"position": "relative", "padding-left": "6mm", **lh},
                )
                for exp in document.experience
            ],
            role="timeline",
            style={"padding-left": "2mm", "border-left": "2px solid #f3f4f6"},
        )
        experience = self.section(title("Experience"), timeline, key="experience")

        education = self.section(
            title("Education"),
            [
                self.entry(
                    self.rich(edu.degree, "div", style={"font-weight": "bold"}),
                    self.rich(edu.institution, "div"),
                    el(
                        "div",
                        self.rich(edu.year),
                        self.rich(edu.grade),
                        style={"display": "flex", "justify-content": "space-between"},
                    ),
                    key=edu.id,
                    style={
                        "background-color": "#f9fafb",
                        "padding": "4mm",
                        "border-left": f"4px solid {accent}",
                    },
                )
                for edu in document.education
            ],
            key="education",
        )

        projects = self.section(
            title("Projects"),
            [
                self.entry(
                    self.rich(project.title, "div", style={"font-weight": "bold"}),
                    self.rich(project.description[0], "p", role="paragraph")
                    if project.description
                    else None,
                    self.link(project.github_link, "View Code →", style={"color": accent})
                    if project.github_link
                    else None,
                    key=project.id,
                    style=lh,
                )
                for project in document.projects[:_MAX_PROJECTS]
            ],
            key="projects",
        )

        body = el(
            "div",
            skills,
            experience,
            el(
                "div",
                education,
                projects,
                role="columns",
                style={"display": "grid", "grid-template-columns": "1fr 1fr", "gap": "8mm"},
            ),
            role="content",
            style={
                "display": "flex",
                "flex-direction": "column",
                "gap": self.mm(settings.section_spacing),
                **self.padding(settings),
            },
        )

        return el("div", self._heading(document.profile, accent), body, role="body")

    def _heading(self, profile: Profile, accent: str | None) -> Node:
        return el(
            "header",
            self.rich(
                profile.full_name,
                "h1",
                role="name",
                style={"font-size": "2.25rem", "font-weight": "bold"},
            ),
            el(
                "div",
                [
                    self.rich(value)
                    for value in (profile.phone, profile.email, profile.location)
                    if value
                ],
                role="contact",
                style={"display": "flex", "flex-wrap": "wrap", "gap": "4mm"},
            ),
            el(
                "div",
                self.profile_links(profile, ("linkedin", "github", "website")),
                role="links",
                style={
                    "display": "flex",
                    "gap": "4mm",
                    "font-weight": "bold",
                    "text-transform": "uppercase",
                },
            ),
            role="header",
            style={"padding": "8mm", "background-color": accent, "color": "#ffffff"},
        )
