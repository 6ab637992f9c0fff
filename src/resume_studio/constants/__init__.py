from __future__ import annotations

from resume_studio.constants.fonts import AVAILABLE_FONTS, DEFAULT_FONT, FontOption, is_allowed_font
from resume_studio.constants.layout import (
    A4_HEIGHT_MM,
    A4_WIDTH_MM,
    BASE_FONT_SIZE,
    MM_TO_PX,
    NEUTRAL_ACCENT,
)

__all__ = [
    "A4_HEIGHT_MM",
    "A4_WIDTH_MM",
    "AVAILABLE_FONTS",
    "BASE_FONT_SIZE",
    "DEFAULT_FONT",
    "FontOption",
    "MM_TO_PX",
    "NEUTRAL_ACCENT",
    "is_allowed_font",
]
