"""Abstract base class for the page-layout grammars."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, ClassVar

from resume_studio.constants.layout import (
    A4_HEIGHT_MM,
    A4_WIDTH_MM,
    BASE_FONT_SIZE,
    BASE_TEXT_COLOR,
    NEUTRAL_ACCENT,
)
from resume_studio.richtext import parse_spans, strip_markup
from resume_studio.templates.page import Child, Node, PageTree, el

if TYPE_CHECKING:
    from resume_studio.models.document import (
        FormattingSettings,
        Profile,
        ResumeDocument,
        TemplateType,
    )

__all__ = ["PROFILE_LINK_LABELS", "ResumeTemplate"]

PROFILE_LINK_LABELS: dict[str, str] = {
    "linkedin": "LinkedIn",
    "github": "GitHub",
    "leetcode": "LeetCode",
    "website": "Portfolio",
}


class ResumeTemplate(ABC):
    """Interface that every layout grammar must implement.

    ``build`` is total: any document shape, including all-empty lists,
    renders without raising.
    """

    template_type: ClassVar[TemplateType]

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name shown in the UI."""

    @abstractmethod
    def build_body(self, document: ResumeDocument, settings: FormattingSettings) -> Node:
        """Lay out the document content inside the page canvas."""

    def build(self, document: ResumeDocument) -> PageTree:
        settings = document.effective_settings
        page = el(
            "div",
            self.build_body(document, settings),
            role="page",
            style=self.page_style(settings),
        )
        return PageTree(template=self.template_type, root=page)

    # ------------------------------------------------------------------
    # Shared layout algebra
    # ------------------------------------------------------------------

    @staticmethod
    def mm(value: float) -> str:
        return f"{value}mm"

    @classmethod
    def page_style(cls, settings: FormattingSettings) -> dict[str, str]:
        """A4 canvas at the base type size, with font, line height and background."""
        return {
            "width": cls.mm(A4_WIDTH_MM),
            "min-height": cls.mm(A4_HEIGHT_MM),
            "font-family": settings.font,
            "font-size": BASE_FONT_SIZE,
            "line-height": str(settings.line_height),
            "background-color": settings.background_color,
            "color": BASE_TEXT_COLOR,
        }

    @classmethod
    def padding(cls, settings: FormattingSettings) -> dict[str, str]:
        return {
            "padding-top": cls.mm(settings.margin_top),
            "padding-right": cls.mm(settings.margin_right),
            "padding-bottom": cls.mm(settings.margin_bottom),
            "padding-left": cls.mm(settings.margin_left),
        }

    @staticmethod
    def line_height(settings: FormattingSettings) -> dict[str, str]:
        return {"line-height": str(settings.line_height)}

    @staticmethod
    def accent(settings: FormattingSettings, fallback: str | None = None) -> str | None:
        """Return the accent colour if customised, otherwise *fallback*."""
        if settings.accent_color != NEUTRAL_ACCENT:
            return settings.accent_color
        return fallback

    @staticmethod
    def rich(
        text: str | None,
        tag: str = "span",
        *,
        role: str | None = None,
        style: Mapping[str, str] | None = None,
    ) -> Node:
        """Wrap a rich-text field's span tree in a node."""
        return el(tag, parse_spans(text or ""), role=role, style=style)

    @staticmethod
    def link(url: str, label: str, *, style: Mapping[str, str] | None = None) -> Node:
        """Link to a bare ``domain/path`` value, prepending the scheme."""
        return el("a", label, role="link", style=style, href=f"https://{strip_markup(url)}")

    @staticmethod
    def join_separated(
        items: Sequence[Node],
        separator: str,
        *,
        style: Mapping[str, str] | None = None,
    ) -> list[Child]:
        """Interleave *separator* between consecutive items only.

        No separator is emitted before the first or after the last item, and
        none at all for fewer than two items.
        """
        joined: list[Child] = []
        for index, item in enumerate(items):
            if index:
                joined.append(el("span", separator, role="separator", style=style))
            joined.append(item)
        return joined

    @classmethod
    def profile_links(
        cls,
        profile: Profile,
        fields: Sequence[str] = ("linkedin", "github", "leetcode", "website"),
        *,
        style: Mapping[str, str] | None = None,
        labels: Mapping[str, str] = PROFILE_LINK_LABELS,
    ) -> list[Node]:
        """Link nodes for the present (non-empty) profile link fields, in order."""
        links: list[Node] = []
        for field in fields:
            value = getattr(profile, field)
            if value:
                links.append(cls.link(value, labels[field], style=style))
        return links

    @classmethod
    def bullet_list(
        cls,
        lines: Sequence[str],
        *,
        style: Mapping[str, str] | None = None,
        item_style: Mapping[str, str] | None = None,
        marker: str | None = None,
    ) -> Node:
        """Render bullet lines in order; an empty sequence yields an empty list."""
        items = [
            el(
                "li",
                el("span", marker, role="marker") if marker else None,
                cls.rich(line),
                role="bullet",
                style=item_style,
            )
            for line in lines
        ]
        return el("ul", items, role="bullets", style=style)

    @staticmethod
    def section(
        title: Node,
        *body: object,
        style: Mapping[str, str] | None = None,
        key: str,
    ) -> Node:
        return el("section", title, *body, role="section", style=style, data_key=key)

    @staticmethod
    def entry(*children: object, key: str, style: Mapping[str, str] | None = None) -> Node:
        """A list entry keyed by its document id."""
        return el("div", *children, role="entry", style=style, data_key=key)
