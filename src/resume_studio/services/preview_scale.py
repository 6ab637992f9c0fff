"""Preview scale factor for fitting the A4 page into the viewport.

Purely presentational: nothing here touches the stored document.
"""

from __future__ import annotations

from resume_studio.constants.layout import A4_WIDTH_MM, MM_TO_PX

DESKTOP_BREAKPOINT_PX = 1024
MOBILE_SCALE = 0.6
MIN_SCALE = 0.5
MAX_SCALE = 1.1
PREVIEW_MARGIN_PX = 40
A4_WIDTH_PX = A4_WIDTH_MM * MM_TO_PX


def is_desktop(viewport_width: float) -> bool:
    return viewport_width >= DESKTOP_BREAKPOINT_PX


def compute_scale(viewport_width: float) -> float:
    """Return the page scale for a viewport *viewport_width* pixels wide.

    Narrow viewports get a fixed scale. On desktop the preview pane is half
    the viewport, less a margin on each side, and the page is scaled to fit it
    within ``[MIN_SCALE, MAX_SCALE]``.
    """
    if not is_desktop(viewport_width):
        return MOBILE_SCALE
    available = 0.5 * viewport_width - 2 * PREVIEW_MARGIN_PX
    return min(max(available / A4_WIDTH_PX, MIN_SCALE), MAX_SCALE)


class FitController:
    """Tracks the viewport width and the scale derived from it."""

    def __init__(self, viewport_width: float = DESKTOP_BREAKPOINT_PX) -> None:
        self.viewport_width = viewport_width
        self.scale = compute_scale(viewport_width)

    @property
    def is_desktop(self) -> bool:
        return is_desktop(self.viewport_width)

    def resize(self, viewport_width: float) -> float:
        """Record a new viewport width and return the recomputed scale."""
        self.viewport_width = viewport_width
        self.scale = compute_scale(viewport_width)
        return self.scale
