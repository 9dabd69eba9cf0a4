"""Tests for border intersection geometry."""

import math

import pytest

from wedge_clock.clock.geometry import (
    CORNER_ANGLES,
    Point,
    build_sector_path,
    corner_point,
    corners_between,
    is_tick_covered,
    normalize_angle,
    point_on_border,
)

CENTER = (200.0, 150.0)
HALF_W = 200.0
HALF_H = 150.0


def border(angle: float) -> Point:
    return point_on_border(CENTER, HALF_W, HALF_H, angle)


def scan_corners(start: float, end: float):
    """Walk every whole degree of the sweep, the slow way."""
    return [
        i for i in range(int(start) + 1, math.ceil(end)) if i % 360 in CORNER_ANGLES
    ]


def test_point_lies_on_border():
    """Every angle lands on one of the four edges and inside the rectangle."""
    eps = 1e-9
    for step in range(360 * 4):
        x, y = border(step / 4)

        on_vertical_edge = math.isclose(x, 0, abs_tol=eps) or math.isclose(x, 2 * HALF_W, abs_tol=eps)
        on_horizontal_edge = math.isclose(y, 0, abs_tol=eps) or math.isclose(y, 2 * HALF_H, abs_tol=eps)

        assert on_vertical_edge or on_horizontal_edge
        assert -eps <= x <= 2 * HALF_W + eps
        assert -eps <= y <= 2 * HALF_H + eps


@pytest.mark.parametrize(
    "angle,expected",
    [
        (0, (200.0, 0.0)),
        (90, (400.0, 150.0)),
        (180, (200.0, 300.0)),
        (270, (0.0, 150.0)),
    ],
)
def test_cardinal_points(angle, expected):
    assert border(angle) == expected


@pytest.mark.parametrize(
    "angle,expected",
    [
        (45, (400.0, 0.0)),
        (135, (400.0, 300.0)),
        (225, (0.0, 300.0)),
        (315, (0.0, 0.0)),
    ],
)
def test_corner_points(angle, expected):
    assert border(angle) == expected
    assert border(angle) == corner_point(CENTER, HALF_W, HALF_H, angle)


@pytest.mark.parametrize("boundary", [45, 90, 135, 180, 225, 270, 315, 360])
def test_continuous_at_octant_boundaries(boundary):
    """Approaching a boundary from below meets the value at the boundary."""
    below = border(boundary - 1e-9)
    at = border(boundary)
    assert below.x == pytest.approx(at.x, abs=1e-6)
    assert below.y == pytest.approx(at.y, abs=1e-6)


def test_right_edge_offsets_square():
    """On a square face a 60 degree ray hits the right edge tan(30) above center."""
    x, y = point_on_border((100.0, 100.0), 100.0, 100.0, 60)
    assert x == 200.0
    assert y == pytest.approx(100.0 - 100.0 * math.tan(math.radians(30)))


def test_angles_reduced_modulo_360():
    assert border(370) == border(10)
    assert border(720) == border(0)
    assert border(-90) == border(270)


def test_normalize_angle():
    assert normalize_angle(0) == 0
    assert normalize_angle(359.5) == 359.5
    assert normalize_angle(360) == 0
    assert normalize_angle(405) == 45
    assert normalize_angle(-1e-20) == 0.0


def test_degenerate_rectangle():
    """Zero extents give the center back instead of failing."""
    assert point_on_border((0.0, 0.0), 0.0, 0.0, 30) == (0.0, 0.0)

    x, y = point_on_border((5.0, 5.0), 0.0, 5.0, 100)
    assert x == 5.0
    assert y == pytest.approx(5.0 + 5.0 * math.tan(math.radians(10)))


def test_corner_point():
    assert corner_point(CENTER, HALF_W, HALF_H, 45) == (400.0, 0.0)
    assert corner_point(CENTER, HALF_W, HALF_H, 135) == (400.0, 300.0)
    assert corner_point(CENTER, HALF_W, HALF_H, 225) == (0.0, 300.0)
    assert corner_point(CENTER, HALF_W, HALF_H, 315) == (0.0, 0.0)
    assert corner_point(CENTER, HALF_W, HALF_H, 405) == (400.0, 0.0)


def test_corner_point_rejects_non_corner():
    with pytest.raises(ValueError):
        corner_point(CENTER, HALF_W, HALF_H, 90)
    with pytest.raises(ValueError):
        corner_point(CENTER, HALF_W, HALF_H, 45.5)


def test_corners_between_full_quarter_sweep():
    assert corners_between(0, 270) == [45, 135, 225]


def test_corners_between_wraparound_without_corners():
    assert corners_between(350, 370) == []


def test_corners_between_second_lap():
    assert corners_between(355, 660) == [405, 495, 585]
    assert corners_between(300, 400) == [315]


def test_corners_between_is_open_interval():
    assert corners_between(45, 135) == []
    assert corners_between(44.9, 135.1) == [45, 135]


def test_corners_between_empty_sweep():
    assert corners_between(90, 90) == []
    assert corners_between(100, 90) == []


@pytest.mark.parametrize(
    "start,end",
    [
        (0, 270),
        (22.5, 270),
        (350, 370),
        (355, 660),
        (44.5, 46),
        (45, 315),
        (305.25, 423),
        (0.1, 359.9),
        (180, 540),
        (359.9, 719),
    ],
)
def test_corners_between_matches_degree_scan(start, end):
    assert corners_between(start, end) == scan_corners(start, end)


def test_sector_path_crosses_three_corners():
    path = build_sector_path(CENTER, HALF_W, HALF_H, 0, 270)

    assert len(path) == 5
    assert path[0] == border(0)
    assert path[1:4] == (
        Point(400.0, 0.0),
        Point(400.0, 300.0),
        Point(0.0, 300.0),
    )
    assert path[-1] == border(270)


def test_sector_path_wraparound():
    path = build_sector_path(CENTER, HALF_W, HALF_H, 350, 370)
    assert path == (border(350), border(10))


def test_sector_path_single_corner():
    path = build_sector_path(CENTER, HALF_W, HALF_H, 80, 170)
    assert path == (border(80), Point(400.0, 300.0), border(170))


def test_sector_path_is_idempotent():
    first = build_sector_path(CENTER, HALF_W, HALF_H, 123.4, 456.7)
    second = build_sector_path(CENTER, HALF_W, HALF_H, 123.4, 456.7)
    assert first == second
    assert isinstance(first, tuple)


def test_tick_covered_open_interval():
    assert is_tick_covered(90, 60, 120)
    assert not is_tick_covered(60, 60, 120)
    assert not is_tick_covered(120, 60, 120)
    assert not is_tick_covered(150, 60, 120)


def test_tick_covered_next_lap():
    """Ticks near 12 o'clock are covered through their second-lap angle."""
    assert is_tick_covered(0, 350, 370)
    assert not is_tick_covered(30, 350, 370)
    assert is_tick_covered(0, 355, 660)
    assert not is_tick_covered(300, 355, 660)
