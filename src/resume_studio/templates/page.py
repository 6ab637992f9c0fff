"""Rendered page tree.

Templates emit a tree of :class:`Node` values.  Each node has an HTML-ish
``tag``, an optional semantic ``role`` (``header``, ``section``, ``entry``,
``bullet``, ``separator``, ...), a CSS ``style`` map in physical units and
children that are nodes, rich-text spans or plain strings.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import Union

from markupsafe import escape

from resume_studio.models.document import TemplateType
from resume_studio.richtext import Span, render_spans_html

__all__ = ["Child", "Node", "PageTree", "el"]

Child = Union["Node", Span, str]


@dataclass(frozen=True)
class Node:
    tag: str
    role: str | None = None
    style: Mapping[str, str] = field(default_factory=dict)
    attrs: Mapping[str, str] = field(default_factory=dict)
    children: tuple[Child, ...] = ()

    def iter(self) -> Iterator[Node]:
        """Yield this node and all descendant nodes, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter()

    def find_all(self, role: str | None = None, tag: str | None = None) -> list[Node]:
        return [
            node
            for node in self.iter()
            if (role is None or node.role == role) and (tag is None or node.tag == tag)
        ]

    def find(self, role: str | None = None, tag: str | None = None) -> Node | None:
        return next(iter(self.find_all(role=role, tag=tag)), None)

    def text(self) -> str:
        """Concatenated visible text of the subtree."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, Node):
                parts.append(child.text())
            elif isinstance(child, Span):
                parts.append(child.plain_text())
            else:
                parts.append(child)
        return "".join(parts)

    def to_html(self) -> str:
        attrs = dict(self.attrs)
        if self.role:
            attrs["data-role"] = self.role
        if self.style:
            attrs["style"] = "; ".join(f"{key}: {value}" for key, value in self.style.items())
        rendered_attrs = "".join(f' {key}="{escape(value)}"' for key, value in attrs.items())

        inner: list[str] = []
        for child in self.children:
            if isinstance(child, Node):
                inner.append(child.to_html())
            elif isinstance(child, Span):
                inner.append(render_spans_html((child,)))
            else:
                inner.append(str(escape(child)))
        return f"<{self.tag}{rendered_attrs}>{''.join(inner)}</{self.tag}>"


def _flatten(children: Iterable[object]) -> Iterator[Child]:
    for child in children:
        if child is None:
            continue
        if isinstance(child, Node | Span | str):
            yield child
        else:
            yield from _flatten(child)  # type: ignore[arg-type]


def el(
    tag: str,
    *children: object,
    role: str | None = None,
    style: Mapping[str, str] | None = None,
    **attrs: str,
) -> Node:
    """Build a node.

    ``None`` children are dropped and nested iterables are flattened, so
    optional parts can be written inline.  Attribute names use underscores
    for dashes (``data_key`` becomes ``data-key``).
    """
    return Node(
        tag=tag,
        role=role,
        style=dict(style or {}),
        attrs={key.replace("_", "-"): value for key, value in attrs.items()},
        children=tuple(_flatten(children)),
    )


@dataclass(frozen=True)
class PageTree:
    """A rendered page: the template that produced it and the root node."""

    template: TemplateType
    root: Node

    def find_all(self, role: str | None = None, tag: str | None = None) -> list[Node]:
        return self.root.find_all(role=role, tag=tag)

    def find(self, role: str | None = None, tag: str | None = None) -> Node | None:
        return self.root.find(role=role, tag=tag)

    def text(self) -> str:
        return self.root.text()

    def to_html(self) -> str:
        return self.root.to_html()

    def with_scale(self, scale: float) -> PageTree:
        """Return a copy whose page is visually scaled for the preview surface."""
        style = {**self.root.style, "transform": f"scale({scale})", "transform-origin": "top"}
        return replace(self, root=replace(self.root, style=style))
