"""SVG Clock Renderer."""

from datetime import datetime, time
from typing import Optional, Union

from wedge_clock.clock.face import ClockFace, Viewport, build_face
from wedge_clock.config import Settings, get_settings
from wedge_clock.logging.config import get_logger

logger = get_logger(__name__)


def _fmt(value: float) -> str:
    """Format a coordinate compactly."""
    return f"{value:.3f}".rstrip("0").rstrip(".")


class ClockRenderer:
    """Renders the wedge clock face as SVG."""

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize renderer.

        Args:
            width: SVG width (defaults to settings)
            height: SVG height (defaults to settings)
            settings: Settings to use instead of the global ones
        """
        self.settings = settings or get_settings()
        self.width = width if width is not None else self.settings.width
        self.height = height if height is not None else self.settings.height
        self.viewport = Viewport.from_size(self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        """Update the drawing surface size."""
        self.width = width
        self.height = height
        self.viewport = Viewport.from_size(width, height)
        logger.debug(f"Viewport resized to {width}x{height}")

    def build(self, current_time: Union[datetime, time]) -> ClockFace:
        """Compute the face for the given time."""
        return build_face(self.viewport, current_time, self.settings.tick_length)

    def render(self, current_time: Union[datetime, time]) -> str:
        """
        Render clock SVG for the given time.

        Args:
            current_time: Time to display

        Returns:
            SVG string
        """
        face = self.build(current_time)
        logger.debug(
            f"Rendering {current_time}: covered ticks {list(face.covered_ticks)}"
        )
        return self.render_face(face)

    def render_face(self, face: ClockFace) -> str:
        """Render an already computed face."""
        wedge = self._generate_wedge(face)
        ticks = self._generate_ticks(face)

        return f"""<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<svg width="{self.width}" height="{self.height}" viewBox="0 0 {self.width} {self.height}" xmlns="http://www.w3.org/2000/svg">
    <rect width="100%" height="100%" fill="{self.settings.background_color}" />

    <!-- Wedge -->
    {wedge}

    <!-- Ticks -->
    {ticks}
</svg>
"""

    def _generate_wedge(self, face: ClockFace) -> str:
        """Generate the wedge path, closed back to the center."""
        first, *rest = face.wedge
        segments = [f"M {_fmt(first.x)} {_fmt(first.y)}"]
        segments.extend(f"L {_fmt(p.x)} {_fmt(p.y)}" for p in rest)
        segments.append("Z")
        path = " ".join(segments)

        color = self.settings.wedge_color
        return f'<path class="wedge" d="{path}" fill="{color}" stroke="{color}" stroke-linejoin="round" />'

    def _generate_ticks(self, face: ClockFace) -> str:
        """Generate the tick lines, colored by wedge coverage."""
        lines = []
        for tick in face.ticks:
            if tick.covered:
                color = self.settings.covered_tick_color
                css_class = "tick covered"
            else:
                color = self.settings.tick_color
                css_class = "tick"
            lines.append(
                f'<line class="{css_class}" x1="{_fmt(tick.inner.x)}" y1="{_fmt(tick.inner.y)}" '
                f'x2="{_fmt(tick.outer.x)}" y2="{_fmt(tick.outer.y)}" '
                f'stroke="{color}" stroke-width="{_fmt(self.settings.tick_stroke_width)}" />'
            )
        return "\n    ".join(lines)
