"""Inline rich-text spans.

Text fields are stored as plain strings carrying a tiny inline markup
vocabulary: ``<b>``, ``<i>`` and ``<span style="font-family: ...">``.  This
module wraps editor selections in that markup, strips it for the text
enhancer, and parses it into an immutable span tree for rendering.

Wrapping never validates or repairs the surrounding markup.  Parsing is
lenient: unknown tags contribute only their text and malformed input
degrades to whatever ``html.parser`` makes of it.
"""

from __future__ import annotations

import html
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString
from markupsafe import escape

__all__ = [
    "FormatOp",
    "Span",
    "SpanKind",
    "parse_spans",
    "render_spans_html",
    "spans_text",
    "strip_markup",
    "to_markup",
    "wrap_selection",
]

_TAG_RE = re.compile(r"<[^>]*>?")
_FONT_FAMILY_RE = re.compile(r"font-family\s*:\s*([^;]+)", re.IGNORECASE)

_BOLD_TAGS = frozenset({"b", "strong"})
_ITALIC_TAGS = frozenset({"i", "em"})


class FormatOp(StrEnum):
    """Formatting actions offered by the editor toolbar."""

    BOLD = "bold"
    ITALIC = "italic"
    FONT = "font"


class SpanKind(StrEnum):
    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    FONT = "font"


@dataclass(frozen=True)
class Span:
    """One node of a rich-text span tree.

    ``TEXT`` spans carry ``text``; the other kinds carry ``children`` and,
    for ``FONT``, the exact CSS ``font`` value.
    """

    kind: SpanKind
    text: str = ""
    font: str | None = None
    children: tuple[Span, ...] = ()

    def plain_text(self) -> str:
        if self.kind is SpanKind.TEXT:
            return self.text
        return spans_text(self.children)


# ----------------------------------------------------------------------
# Encoding (editor side)
# ----------------------------------------------------------------------


def _font_open_tag(font: str) -> str:
    # Font values such as '"Segoe UI"' contain double quotes; single-quote
    # the attribute then so the value survives a parse unchanged.
    if '"' in font:
        return f"<span style='font-family: {font}'>"
    return f'<span style="font-family: {font}">'


def _normalize_range(text: str, start: int, end: int) -> tuple[int, int]:
    """Clamp a selection to the text and order its endpoints."""
    length = len(text)
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    if start > end:
        start, end = end, start
    return start, end


def wrap_selection(
    text: str,
    start: int,
    end: int,
    op: FormatOp | str,
    font: str | None = None,
) -> str:
    """Wrap ``text[start:end]`` in the markup for *op*.

    Returns *text* unchanged when the selection is empty, or when *op* is
    ``FONT`` and no font value is given.  Existing markup inside or around
    the selection is left exactly as it is, so nested formatting survives.
    """
    start, end = _normalize_range(text, start, end)
    if start == end:
        return text

    op = FormatOp(op)
    selected = text[start:end]
    if op is FormatOp.BOLD:
        wrapped = f"<b>{selected}</b>"
    elif op is FormatOp.ITALIC:
        wrapped = f"<i>{selected}</i>"
    else:
        if not font:
            return text
        wrapped = f"{_font_open_tag(font)}{selected}</span>"

    return text[:start] + wrapped + text[end:]


def strip_markup(text: str) -> str:
    """Remove every inline tag, leaving plain language text.

    Used before sending a field to the text enhancer; formatting does not
    survive an enhancement round trip.
    """
    return _TAG_RE.sub("", text)


def to_markup(spans: Iterable[Span]) -> str:
    """Re-encode a span tree as storable text."""
    parts: list[str] = []
    for span in spans:
        if span.kind is SpanKind.TEXT:
            parts.append(html.escape(span.text, quote=False))
        elif span.kind is SpanKind.BOLD:
            parts.append(f"<b>{to_markup(span.children)}</b>")
        elif span.kind is SpanKind.ITALIC:
            parts.append(f"<i>{to_markup(span.children)}</i>")
        else:
            parts.append(f"{_font_open_tag(span.font or '')}{to_markup(span.children)}</span>")
    return "".join(parts)


# ----------------------------------------------------------------------
# Decoding (render side)
# ----------------------------------------------------------------------


def _font_from_style(style: str | None) -> str | None:
    if not style:
        return None
    match = _FONT_FAMILY_RE.search(style)
    if match is None:
        return None
    return match.group(1).strip() or None


def _convert(nodes: Iterable[object]) -> tuple[Span, ...]:
    spans: list[Span] = []
    for node in nodes:
        if isinstance(node, PreformattedString):
            # comments, doctypes, processing instructions
            continue
        if isinstance(node, NavigableString):
            if node:
                spans.append(Span(SpanKind.TEXT, text=str(node)))
            continue
        if not isinstance(node, Tag):
            continue

        children = _convert(node.children)
        name = (node.name or "").lower()
        if name in _BOLD_TAGS:
            spans.append(Span(SpanKind.BOLD, children=children))
        elif name in _ITALIC_TAGS:
            spans.append(Span(SpanKind.ITALIC, children=children))
        elif name == "span" and (font := _font_from_style(node.get("style"))):
            spans.append(Span(SpanKind.FONT, font=font, children=children))
        else:
            spans.extend(children)
    return tuple(spans)


@lru_cache(maxsize=2048)
def parse_spans(markup: str) -> tuple[Span, ...]:
    """Parse stored markup into a span tree.

    Results are cached; spans are immutable so sharing them is safe.
    """
    if not markup:
        return ()
    soup = BeautifulSoup(markup, "html.parser")
    return _convert(soup.children)


def spans_text(spans: Iterable[Span]) -> str:
    """Concatenate the visible text of *spans*."""
    return "".join(span.plain_text() for span in spans)


def render_spans_html(spans: Iterable[Span]) -> str:
    """Serialise a span tree as an HTML fragment, escaping all text."""
    parts: list[str] = []
    for span in spans:
        if span.kind is SpanKind.TEXT:
            parts.append(str(escape(span.text)))
        elif span.kind is SpanKind.BOLD:
            parts.append(f"<b>{render_spans_html(span.children)}</b>")
        elif span.kind is SpanKind.ITALIC:
            parts.append(f"<i>{render_spans_html(span.children)}</i>")
        else:
            font = escape(span.font or "")
            parts.append(
                f'<span style="font-family: {font}">{render_spans_html(span.children)}</span>'
            )
    return "".join(parts)
