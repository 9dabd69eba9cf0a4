"""Per-frame clock face model: the wedge polygon and the tick marks."""

from datetime import datetime, time
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from wedge_clock.clock.angles import HandAngles, hand_angles_for, wrap_sector
from wedge_clock.clock.geometry import (
    Point,
    build_sector_path,
    corners_between,
    is_tick_covered,
    point_on_border,
)
from wedge_clock.logging.config import get_logger

logger = get_logger(__name__)

TICK_COUNT = 12
TICK_SPACING = 360.0 / TICK_COUNT


class Viewport(BaseModel):
    """Rectangle given by its center and half-extents."""

    model_config = ConfigDict(frozen=True)

    center: Point
    half_w: float = Field(ge=0)
    half_h: float = Field(ge=0)

    @classmethod
    def from_size(cls, width: float, height: float) -> "Viewport":
        """Build the viewport for a drawing surface of the given size."""
        return cls(
            center=Point(width / 2, height / 2),
            half_w=width / 2,
            half_h=height / 2,
        )

    def border_point(self, angle: float) -> Point:
        """Border point at an angle."""
        return point_on_border(self.center, self.half_w, self.half_h, angle)

    def inset(self, amount: float) -> "Viewport":
        """Shrink the rectangle by ``amount`` on every side, not below zero."""
        return Viewport(
            center=self.center,
            half_w=max(self.half_w - amount, 0.0),
            half_h=max(self.half_h - amount, 0.0),
        )


class Tick(BaseModel):
    """One of the twelve hour tick marks."""

    model_config = ConfigDict(frozen=True)

    index: int
    angle: float
    inner: Point
    outer: Point
    covered: bool


class ClockFace(BaseModel):
    """Everything the renderer needs to draw one frame."""

    model_config = ConfigDict(frozen=True)

    viewport: Viewport
    hands: HandAngles
    start: float
    end: float
    corners: Tuple[float, ...]
    wedge: Tuple[Point, ...]
    ticks: Tuple[Tick, ...]

    @property
    def covered_ticks(self) -> Tuple[int, ...]:
        """Indices of the ticks inside the wedge."""
        return tuple(tick.index for tick in self.ticks if tick.covered)


def build_ticks(
    viewport: Viewport, start: float, end: float, tick_length: float
) -> Tuple[Tick, ...]:
    """Compute the twelve ticks and whether the sector covers each of them."""
    inner_viewport = viewport.inset(tick_length)
    ticks = []
    for index in range(TICK_COUNT):
        angle = index * TICK_SPACING
        ticks.append(
            Tick(
                index=index,
                angle=angle,
                inner=inner_viewport.border_point(angle),
                outer=viewport.border_point(angle),
                covered=is_tick_covered(angle, start, end),
            )
        )
    return tuple(ticks)


def build_face(
    viewport: Viewport,
    moment: Union[datetime, time],
    tick_length: float = 10.0,
) -> ClockFace:
    """
    Build the clock face for a moment.

    Args:
        viewport: Drawing area
        moment: Wall-clock time to show
        tick_length: Length of the tick marks, measured inwards from the border

    Returns:
        ClockFace with the wedge polygon (starting at the center) and ticks
    """
    hands = hand_angles_for(moment)
    start, end = wrap_sector(hands.hour, hands.minute)

    border_path = build_sector_path(
        viewport.center, viewport.half_w, viewport.half_h, start, end
    )
    wedge = (viewport.center, *border_path)
    ticks = build_ticks(viewport, start, end, tick_length)

    logger.debug(
        f"Face for {moment}: hour={hands.hour:.2f} minute={hands.minute:.2f} "
        f"sector={start:.2f}->{end:.2f}"
    )

    return ClockFace(
        viewport=viewport,
        hands=hands,
        start=start,
        end=end,
        corners=tuple(corners_between(start, end)),
        wedge=wedge,
        ticks=ticks,
    )
