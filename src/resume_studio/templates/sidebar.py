"""Sidebar template.

A fixed 35/65 split: a dark sidebar with identity, contact, links, skills
and education in white text, and a main column with Experience, Projects
and Achievements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.constants.layout import A4_HEIGHT_MM
from resume_studio.models.document import TemplateType
from resume_studio.templates.base import ResumeTemplate
from resume_studio.templates.page import Node, el

if TYPE_CHECKING:
    from resume_studio.models.document import FormattingSettings, ResumeDocument

__all__ = ["SidebarResumeTemplate"]

_SIDEBAR_BACKGROUND = "#2c3e50"
_SIDEBAR_TEXT = "#ffffff"
_FALLBACK_ACCENT = "#2563eb"


class SidebarResumeTemplate(ResumeTemplate):
    """Two-column layout with a dark identity sidebar."""

    template_type = TemplateType.MODERN_SIDEBAR

    @property
    def name(self) -> str:
        return "Modern Sidebar"

    def build_body(self, document: ResumeDocument, settings: FormattingSettings) -> Node:
        return el(
            "div",
            self._sidebar(document, settings),
            self._main(document, settings),
            role="body",
            style={"display": "flex", "min-height": self.mm(A4_HEIGHT_MM)},
        )

    # -- sidebar -----------------------------------------------------------

    def _sidebar_title(self, title: str) -> Node:
        return el(
            "h3",
            title,
            role="section-title",
            style={
                "font-weight": "bold",
                "text-transform": "uppercase",
                "border-bottom": "1px solid rgba(255, 255, 255, 0.3)",
                "margin-bottom": "2mm",
            },
        )

    def _sidebar(self, document: ResumeDocument, settings: FormattingSettings) -> Node:
        profile = document.profile
        identity = el(
            "div",
            self.rich(profile.full_name, "h1", role="name", style={"font-size": "1.5rem"}),
            el(
                "div",
                [
                    self.rich(value, "div")
                    for value in (profile.email, profile.phone, profile.location)
                    if value
                ],
                role="contact",
                style={"font-size": "0.75rem"},
            ),
            role="header",
        )

        links = self.section(
            self._sidebar_title("Links"),
            el(
                "div",
                [
                    el("div", link)
                    for link in self.profile_links(profile, ("linkedin", "github", "website"))
                ],
                role="links",
            ),
            key="links",
            style={"font-size": "0.75rem"},
        )

        skills = self.section(
            self._sidebar_title("Skills"),
            [
                self.entry(
                    self.rich(skill.name, "div", style={"font-weight": "bold"}),
                    self.rich(skill.items, "div"),
                    key=skill.id,
                )
                for skill in document.skills
            ],
            key="skills",
            style={"font-size": "0.75rem"},
        )

        education = self.section(
            self._sidebar_title("Education"),
            [
                self.entry(
                    self.rich(edu.degree, "div", style={"font-weight": "bold"}),
                    self.rich(edu.institution, "div"),
                    self.rich(edu.year, "div", style={"font-style": "italic"}),
                    self.rich(edu.grade, "div") if edu.grade else None,
                    key=edu.id,
                )
                for edu in document.education
            ],
            key="education",
            style={"font-size": "0.75rem"},
        )

        return el(
            "aside",
            identity,
            links,
            skills,
            education,
            role="sidebar",
            style={
                "width": "35%",
                "padding": "6mm",
                "display": "flex",
                "flex-direction": "column",
                "gap": self.mm(settings.section_spacing),
                "background-color": _SIDEBAR_BACKGROUND,
                "color": _SIDEBAR_TEXT,
                **self.line_height(settings),
            },
        )

    # -- main column -------------------------------------------------------

    def _main(self, document: ResumeDocument, settings: FormattingSettings) -> Node:
        accent = settings.accent_color or _FALLBACK_ACCENT
        spacing = {"margin-bottom": self.mm(settings.section_spacing)}

        def title(text: str) -> Node:
            return el(
                "h2",
                text,
                role="section-title",
                style={
                    "font-size": "1.25rem",
                    "font-weight": "bold",
                    "text-transform": "uppercase",
                    "color": accent,
                    "border-bottom": f"2px solid {accent}",
                },
            )

        bullets_style = {"list-style-type": "disc", "margin-left": "4mm"}

        experience = None
        if document.experience:
            experience = self.section(
                title("Experience"),
                [
                    self.entry(
                        el(
                            "div",
                            self.rich(exp.company),
                            self.rich(exp.duration, style={"font-weight": "normal"}),
                            style={
                                "display": "flex",
                                "justify-content": "space-between",
                                "font-weight": "bold",
                            },
                        ),
                        self.rich(
                            exp.role, "div", style={"font-style": "italic", "color": accent}
                        ),
                        self.bullet_list(exp.description, style=bullets_style),
                        key=exp.id,
                    )
                    for exp in document.experience
                ],
                key="experience",
                style=spacing,
            )

        projects = []
        for project in document.projects:
            links = []
            if project.demo_link:
                links.append(self.link(project.demo_link, "App"))
            if project.github_link:
                links.append(self.link(project.github_link, "Code"))
            projects.append(
                self.entry(
                    el(
                        "div",
                        self.rich(project.title),
                        el("div", links, style={"display": "flex", "gap": "2mm"}),
                        style={
                            "display": "flex",
                            "justify-content": "space-between",
                            "font-weight": "bold",
                        },
                    ),
                    self.bullet_list(project.description, style=bullets_style),
                    key=project.id,
                )
            )

        achievements = el(
            "ul",
            [
                el("li", self.rich(ach.description), role="entry", data_key=ach.id)
                for ach in document.achievements
            ],
            style=bullets_style,
        )

        return el(
            "main",
            experience,
            self.section(title("Projects"), projects, key="projects", style=spacing),
            self.section(title("Achievements"), achievements, key="achievements"),
            role="main",
            style={"width": "65%", **self.padding(settings), **self.line_height(settings)},
        )
