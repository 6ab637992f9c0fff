"""Classical single-column template.

Centred name and contact header followed by full-width stacked sections:
Education, Skills, Experience (only when non-empty), Projects and
Achievements.  Section headings are underlined in the accent colour.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.models.document import TemplateType
from resume_studio.richtext import strip_markup
from resume_studio.templates.base import ResumeTemplate
from resume_studio.templates.page import Node, el

if TYPE_CHECKING:
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

__all__ = ["ClassicalResumeTemplate"]

_LINK_COLOR = "#1d4ed8"


class ClassicalResumeTemplate(ResumeTemplate):
    """Single-column layout with underlined section headings."""

    template_type = TemplateType.ADMIN_CLASSICAL

    @property
    def name(self) -> str:
        return "Classical"

    def build_body(self, document: ResumeDocument, settings: FormattingSettings) -> Node:
        sections = [
            self._education(document.education, settings),
            self._skills(document.skills, settings),
            self._experience(document.experience, settings) if document.experience else None,
            self._projects(document.projects, settings),
            self._achievements(document.achievements, settings),
        ]
        return el(
            "div",
            self._heading(document.profile, settings),
            sections,
            role="body",
            style=self.padding(settings),
        )

    # -- helpers -----------------------------------------------------------

    def _accent_style(self, settings: FormattingSettings) -> dict[str, str]:
        accent = self.accent(settings)
        return {"color": accent} if accent else {}

    def _section_title(self, title: str, settings: FormattingSettings) -> Node:
        return el(
            "h2",
            title,
            role="section-title",
            style={
                "font-weight": "bold",
                "font-size": "0.875rem",
                "text-transform": "uppercase",
                "letter-spacing": "0.05em",
                "margin-bottom": "2mm",
                "border-bottom": f"1px solid {settings.accent_color}",
                "color": settings.accent_color,
            },
        )

    def _section(self, key: str, title: str, settings: FormattingSettings, *body: object) -> Node:
        return self.section(
            self._section_title(title, settings),
            *body,
            key=key,
            style={"margin-bottom": self.mm(settings.section_spacing)},
        )

    # -- heading -----------------------------------------------------------

    def _heading(self, profile: Profile, settings: FormattingSettings) -> Node:
        accent_style = self._accent_style(settings)
        lh = self.line_height(settings)

        contact: list[Node] = []
        if profile.phone:
            contact.append(
                el("a", self.rich(profile.phone), href=f"tel:{strip_markup(profile.phone)}")
            )
        if profile.email:
            contact.append(
                el("a", self.rich(profile.email), href=f"mailto:{strip_markup(profile.email)}")
            )

        links = self.profile_links(profile, style=accent_style)

        return el(
            "header",
            self.rich(
                profile.full_name,
                "h1",
                role="name",
                style={"font-size": "1.875rem", "font-weight": "bold", **accent_style},
            ),
            el(
                "div",
                contact,
                role="contact",
                style={"display": "flex", "justify-content": "center", "gap": "4mm", **lh},
            ),
            el(
                "div",
                self.join_separated(links, "•", style={"color": "#000000"}),
                role="links",
                style={
                    "display": "flex",
                    "justify-content": "center",
                    "gap": "3mm",
                    "color": _LINK_COLOR,
                    **lh,
                },
            ),
            role="header",
            style={"text-align": "center", "margin-bottom": "5mm"},
        )

    # -- sections ----------------------------------------------------------

    def _education(self, entries: tuple[Education, ...], settings: FormattingSettings) -> Node:
        rows = []
        for edu in entries:
            details = el(
                "div",
                el("b", self.rich(edu.degree)),
                [", ", self.rich(edu.institution)] if edu.institution else None,
                [", (", self.rich(edu.year), ")"] if edu.year else None,
                style={"flex": "1"},
            )
            grade = self.rich(edu.grade, "div", style={"white-space": "nowrap"})
            rows.append(
                self.entry(
                    details,
                    grade,
                    key=edu.id,
                    style={"display": "flex", "justify-content": "space-between"},
                )
            )
        return self._section("education", "Education", settings, rows)

    def _skills(self, entries: tuple[SkillCategory, ...], settings: FormattingSettings) -> Node:
        rows = [
            self.entry(
                self.rich(skill.name, style={"font-weight": "bold", "width": "140px"}),
                el("span", ":", style={"padding": "0 2mm"}),
                self.rich(skill.items, style={"flex": "1"}),
                key=skill.id,
                style={"display": "flex"},
            )
            for skill in entries
        ]
        return self._section("skills", "Skills", settings, rows)

    def _experience(self, entries: tuple[Experience, ...], settings: FormattingSettings) -> Node:
        items = []
        for exp in entries:
            headline = el(
                "div",
                el(
                    "div",
                    self.rich(exp.company, style={"font-weight": "bold"}),
                    " ",
                    el(
                        "span",
                        " - ",
                        self.rich(exp.role),
                        style={"font-style": "italic", "color": settings.accent_color},
                    ),
                ),
                self.rich(exp.duration, "div", style={"white-space": "nowrap"}),
                style={"display": "flex", "justify-content": "space-between"},
            )
            location = (
                self.rich(exp.location, "div", style={"font-style": "italic", "color": "#4b5563"})
                if exp.location
                else None
            )
            items.append(
                self.entry(
                    headline,
                    location,
                    self.bullet_list(
                        exp.description,
                        style={"list-style-type": "disc", "margin-left": "5mm"},
                    ),
                    key=exp.id,
                )
            )
        return self._section("experience", "Experience", settings, items)

    def _projects(self, entries: tuple[Project, ...], settings: FormattingSettings) -> Node:
        accent_style = self._accent_style(settings)
        items = []
        for project in entries:
            links = []
            if project.demo_link:
                links.append(self.link(project.demo_link, "App", style=accent_style))
            if project.github_link:
                links.append(self.link(project.github_link, "GitHub", style=accent_style))
            headline = el(
                "div",
                self.rich(project.title, style={"font-weight": "bold"}),
                el("div", links, style={"display": "flex", "gap": "3mm", "color": _LINK_COLOR}),
                style={"display": "flex", "justify-content": "space-between"},
            )
            items.append(
                self.entry(
                    headline,
                    self.bullet_list(
                        project.description,
                        style={"list-style-type": "disc", "margin-left": "5mm"},
                    ),
                    key=project.id,
                )
            )
        return self._section("projects", "Projects", settings, items)

    def _achievements(
        self, entries: tuple[Achievement, ...], settings: FormattingSettings
    ) -> Node:
        items = [
            el("li", self.rich(ach.description), role="entry", data_key=ach.id)
            for ach in entries
        ]
        return self._section(
            "achievements",
            "Achievements",
            settings,
            el("ul", items, style={"list-style-type": "disc", "margin-left": "5mm"}),
        )
