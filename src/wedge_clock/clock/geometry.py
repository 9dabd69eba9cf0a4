"""Border intersection geometry for a rectangular clock face.

Angles are in degrees, measured clockwise from "up" (12 o'clock). Points are in
viewport space: origin at the top-left corner, y growing downwards.
"""

import math
from typing import Callable, List, NamedTuple, Tuple

from wedge_clock.logging.config import get_logger

logger = get_logger(__name__)

FULL_TURN = 360.0
OCTANT = 45.0

# Corner angles in clockwise order, starting from the top-right corner.
CORNER_ANGLES: Tuple[int, ...] = (45, 135, 225, 315)

# (x sign, y sign) of each corner relative to the center.
_CORNER_SIGNS = {
    45: (1, -1),
    135: (1, 1),
    225: (-1, 1),
    315: (-1, -1),
}


class Point(NamedTuple):
    """A point in viewport space."""

    x: float
    y: float


def normalize_angle(angle: float) -> float:
    """Reduce an angle into [0, 360)."""
    effective = angle % FULL_TURN
    # Tiny negative inputs round up to exactly 360.0
    if effective >= FULL_TURN:
        effective = 0.0
    return effective


def _tan(degrees: float) -> float:
    """Tangent in degrees, exactly 1 at the 45 degree end of an octant."""
    if degrees == OCTANT:
        return 1.0
    return math.tan(math.radians(degrees))


def _top_right(cx: float, cy: float, w: float, h: float, angle: float) -> Point:
    return Point(cx + w * _tan(angle), cy - h)


def _right_upper(cx: float, cy: float, w: float, h: float, angle: float) -> Point:
    return Point(cx + w, cy - h * _tan(90 - angle))


def _right_lower(cx: float, cy: float, w: float, h: float, angle: float) -> Point:
    return Point(cx + w, cy + h * _tan(angle - 90))


def _bottom_right(cx: float, cy: float, w: float, h: float, angle: float) -> Point:
    return Point(cx + w * _tan(180 - angle), cy + h)


def _bottom_left(cx: float, cy: float, w: float, h: float, angle: float) -> Point:
    return Point(cx - w * _tan(angle - 180), cy + h)


def _left_lower(cx: float, cy: float, w: float, h: float, angle: float) -> Point:
    return Point(cx - w, cy + h * _tan(270 - angle))


def _left_upper(cx: float, cy: float, w: float, h: float, angle: float) -> Point:
    return Point(cx - w, cy - h * _tan(angle - 270))


def _top_left(cx: float, cy: float, w: float, h: float, angle: float) -> Point:
    return Point(cx - w * _tan(360 - angle), cy - h)


_OCTANTS: Tuple[Callable[[float, float, float, float, float], Point], ...] = (
    _top_right,
    _right_upper,
    _right_lower,
    _bottom_right,
    _bottom_left,
    _left_lower,
    _left_upper,
    _top_left,
)


def point_on_border(
    center: Tuple[float, float],
    half_w: float,
    half_h: float,
    angle: float,
) -> Point:
    """
    Find where a ray from the center exits the rectangle.

    The angle is split into eight 45 degree octants, each hitting one half of
    one edge. An angle sitting exactly on an octant boundary belongs to the
    octant above it, so 45 is handled by the right edge and lands on the
    top-right corner. The offset along the edge is the edge's own half-extent
    times the tangent of the distance to the nearest axis direction, which
    puts every corner exactly at its 45 degree multiple.

    Args:
        center: Rectangle center (cx, cy)
        half_w: Half of the rectangle width
        half_h: Half of the rectangle height
        angle: Degrees clockwise from up; reduced modulo 360

    Returns:
        Border point
    """
    effective = normalize_angle(angle)
    assert 0.0 <= effective < FULL_TURN, f"angle {angle} not reduced: {effective}"

    cx, cy = center
    octant = min(int(effective // OCTANT), len(_OCTANTS) - 1)
    return _OCTANTS[octant](cx, cy, half_w, half_h, effective)


def corner_point(
    center: Tuple[float, float],
    half_w: float,
    half_h: float,
    corner_angle: float,
) -> Point:
    """Return the rectangle corner sitting at a corner angle (45, 135, 225 or 315, mod 360)."""
    key = int(normalize_angle(corner_angle))
    if key != normalize_angle(corner_angle) or key not in _CORNER_SIGNS:
        raise ValueError(f"{corner_angle} is not a corner angle")

    sign_x, sign_y = _CORNER_SIGNS[key]
    cx, cy = center
    return Point(cx + sign_x * half_w, cy + sign_y * half_h)


def corners_between(start: float, end: float) -> List[float]:
    """
    List the corner angles strictly between start and end, in clockwise order.

    Both angles are on the continuous scale, so ``end`` may exceed 360 when the
    sector wraps past 12 o'clock. Corners beyond 360 are reported with the lap
    added (e.g. 405 for the top-right corner on the second lap).
    """
    corners: List[float] = []
    if end <= start:
        return corners

    first_lap = math.floor(start / FULL_TURN)
    last_lap = math.floor(end / FULL_TURN)
    for lap in range(first_lap, last_lap + 1):
        for base in CORNER_ANGLES:
            candidate = base + lap * FULL_TURN
            if start < candidate < end:
                corners.append(candidate)
    return corners


def build_sector_path(
    center: Tuple[float, float],
    half_w: float,
    half_h: float,
    start: float,
    end: float,
) -> Tuple[Point, ...]:
    """
    Build the border part of a sector polygon, clockwise from start to end.

    The result is the start border point, every corner crossed, then the end
    border point. Callers put the center in front and close the shape back to
    it to get the full wedge.

    Args:
        center: Rectangle center (cx, cy)
        half_w: Half of the rectangle width
        half_h: Half of the rectangle height
        start: Start angle in degrees
        end: End angle on the same continuous scale (may be >= 360)

    Returns:
        Ordered tuple of points
    """
    corners = corners_between(start, end)
    path = [point_on_border(center, half_w, half_h, start)]
    path.extend(corner_point(center, half_w, half_h, corner) for corner in corners)
    path.append(point_on_border(center, half_w, half_h, end))

    logger.debug(f"Sector {start:.2f} -> {end:.2f} crosses corners {corners}")
    return tuple(path)


def is_tick_covered(tick_angle: float, start: float, end: float) -> bool:
    """
    Check whether a tick lies inside the open sector (start, end).

    The tick is tested both as-is and one lap later, since ``end`` may run past
    360 when the sector wraps around 12 o'clock.
    """
    return start < tick_angle < end or start < tick_angle + FULL_TURN < end
