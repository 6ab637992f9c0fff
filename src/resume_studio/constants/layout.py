"""Physical page and preview constants shared by the renderer and fit controller."""

from __future__ import annotations

# ISO A4 canvas
A4_WIDTH_MM = 210
A4_HEIGHT_MM = 297
BASE_FONT_SIZE = "10.5pt"
BASE_TEXT_COLOR = "#000000"

# CSS reference pixels per millimetre (96 dpi)
MM_TO_PX = 3.78

# Accent colour treated as "not customised"
NEUTRAL_ACCENT = "#000000"
