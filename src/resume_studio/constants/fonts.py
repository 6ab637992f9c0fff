"""Font-family allow-list offered by the editor.

Values are CSS ``font-family`` strings.  They are stored verbatim both in
``FormattingSettings.font`` and inside inline font-styled spans.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FontOption:
    """A selectable font: display name plus the exact CSS value."""

    name: str
    value: str


DEFAULT_FONT = (
    'ui-sans-serif, system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", '
    'Roboto, "Helvetica Neue", Arial, sans-serif'
)

AVAILABLE_FONTS: tuple[FontOption, ...] = (
    FontOption("Default (Sans)", DEFAULT_FONT),
    FontOption("Serif (Times)", "Times New Roman, Times, serif"),
    FontOption("Serif (Georgia)", 'Georgia, Cambria, "Times New Roman", Times, serif'),
    FontOption("Sans (Arial)", "Arial, Helvetica, sans-serif"),
    FontOption("Mono (Courier)", '"Courier New", Courier, monospace'),
)

_ALLOWED_VALUES = frozenset(option.value for option in AVAILABLE_FONTS)


def is_allowed_font(value: str) -> bool:
    """Return True if *value* is one of the allow-listed font-family strings."""
    return value in _ALLOWED_VALUES
