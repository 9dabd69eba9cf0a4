"""Clock face geometry, rendering and redraw service."""

from wedge_clock.clock.angles import HandAngles, hand_angles, hand_angles_for, wrap_sector
from wedge_clock.clock.face import ClockFace, Tick, Viewport, build_face
from wedge_clock.clock.geometry import (
    Point,
    build_sector_path,
    corners_between,
    is_tick_covered,
    point_on_border,
)

__all__ = [
    "ClockFace",
    "HandAngles",
    "Point",
    "Tick",
    "Viewport",
    "build_face",
    "build_sector_path",
    "corners_between",
    "hand_angles",
    "hand_angles_for",
    "is_tick_covered",
    "point_on_border",
    "wrap_sector",
]
