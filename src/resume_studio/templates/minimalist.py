"""Minimalist template.

Centred light header and single-column sections with a generous vertical
rhythm.  Experience bullets are joined into one paragraph and each project
shows only its first bullet line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_studio.models.document import TemplateType
from resume_studio.richtext import Span, SpanKind, parse_spans
from resume_studio.templates.base import ResumeTemplate
from resume_studio.templates.page import Node, el

if TYPE_CHECKING:
    from collections.abc import Sequence

    from resume_studio.models.document import FormattingSettings, ResumeDocument

__all__ = ["MinimalistResumeTemplate"]

_MUTED = "#6b7280"
_FAINT = "#9ca3af"


def _joined_spans(lines: Sequence[str]) -> list[Span]:
    """Span trees of all lines, separated by single spaces."""
    spans: list[Span] = []
    for index, line in enumerate(lines):
        if index:
            spans.append(Span(SpanKind.TEXT, text=" "))
        spans.extend(parse_spans(line))
    return spans


class MinimalistResumeTemplate(ResumeTemplate):
    """Single-column layout with paragraph-style experience."""

    template_type = TemplateType.MINIMALIST

    @property
    def name(self) -> str:
        return "Minimalist"

    def build_body(self, document: ResumeDocument, settings: FormattingSettings) -> Node:
        accent = self.accent(settings)
        accent_style = {"color": accent} if accent else {}
        lh = self.line_height(settings)

        def section(key: str, title: str, *body: object) -> Node:
            heading = el(
                "h3",
                title,
                role="section-title",
                style={
                    "font-size": "0.875rem",
                    "font-weight": "bold",
                    "text-transform": "uppercase",
                    "letter-spacing": "0.1em",
                    "color": _FAINT,
                    "margin-bottom": "4mm",
                },
            )
            return self.section(heading, *body, key=key)

        education = section(
            "education",
            "Education",
            [
                self.entry(
                    el(
                        "div",
                        self.rich(edu.degree, "div", style=accent_style),
                        self.rich(edu.institution, "div", style={"color": "#4b5563"}),
                    ),
                    el(
                        "div",
                        self.rich(edu.year, "div"),
                        self.rich(edu.grade, "div", style={"color": _MUTED}),
                        style={"text-align": "right"},
                    ),
                    key=edu.id,
                    style={"display": "grid", "grid-template-columns": "1fr auto", **lh},
                )
                for edu in document.education
            ],
        )

        skills = section(
            "skills",
            "Skills",
            el(
                "div",
                [
                    self.entry(
                        el("span", self.rich(skill.name), ":", style=accent_style),
                        " ",
                        self.rich(skill.items, style={"color": "#4b5563"}),
                        key=skill.id,
                        style={"border": "1px solid #e5e7eb", "padding": "1mm 3mm"},
                    )
                    for skill in document.skills
                ],
                style={"display": "flex", "flex-wrap": "wrap", "gap": "2mm"},
            ),
        )

        experience = section(
            "experience",
            "Experience",
            [
                self.entry(
                    el(
                        "div",
                        self.rich(exp.company, "h4", style={"font-family": "serif", **accent_style}),
                        self.rich(exp.duration, style={"color": _FAINT}),
                        style={"display": "flex", "justify-content": "space-between"},
                    ),
                    self.rich(exp.role, "div", style={"font-weight": "500"}),
                    el("p", _joined_spans(exp.description), role="paragraph")
                    if exp.description
                    else None,
                    key=exp.id,
                    style=lh,
                )
                for exp in document.experience
            ],
        )

        projects = section(
            "projects",
            "Selected Projects",
            [
                self.entry(
                    el(
                        "div",
                        self.rich(project.title, style=accent_style),
                        self.link(project.github_link, "[Code]", style={"color": _FAINT})
                        if project.github_link
                        else None,
                        style={"display": "flex", "gap": "2mm"},
                    ),
                    self.rich(project.description[0], "p", role="paragraph")
                    if project.description
                    else None,
                    key=project.id,
                    style=lh,
                )
                for project in document.projects
            ],
        )

        return el(
            "div",
            self._heading(document, settings),
            el(
                "div",
                education,
                skills,
                experience,
                projects,
                role="sections",
                style={
                    "display": "flex",
                    "flex-direction": "column",
                    "gap": self.mm(2 * settings.section_spacing),
                },
            ),
            role="body",
            style={"max-width": "90%", "margin": "0 auto", **self.padding(settings)},
        )

    def _heading(self, document: ResumeDocument, settings: FormattingSettings) -> Node:
        profile = document.profile
        contact = [self.rich(value) for value in (profile.email, profile.phone) if value]
        return el(
            "header",
            self.rich(
                profile.full_name,
                "h1",
                role="name",
                style={"font-size": "2.25rem", "font-weight": "300"},
            ),
            el(
                "div",
                self.join_separated(contact, "|"),
                role="contact",
                style={
                    "display": "flex",
                    "justify-content": "center",
                    "gap": "4mm",
                    "color": _MUTED,
                    **self.line_height(settings),
                },
            ),
            el(
                "div",
                self.profile_links(profile, ("linkedin", "github")),
                role="links",
                style={
                    "display": "flex",
                    "justify-content": "center",
                    "gap": "4mm",
                    "text-transform": "uppercase",
                    "color": _FAINT,
                },
            ),
            role="header",
            style={"text-align": "center", "margin-bottom": "8mm"},
        )
