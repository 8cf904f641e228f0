from __future__ import annotations

import numpy as np
import pytest

from detectors.line_probe import (
    ProbeStatus,
    build_strip,
    classify_mask,
    classify_strip,
    find_line,
    find_vertex,
    strip_mask,
)
from models.direction import Direction
from models.point import Point
from models.vertex import Vertex
from utils.pixel_source import ImagePixelSource

WHITE = (255, 255, 255)
TOL = 50


@pytest.fixture
def t_junction(blank_image) -> ImagePixelSource:
    """Horizontal line rows 60-62 (x 10-90) crossed by vertical line cols 70-72 (y 10-90)."""
    img = blank_image(100, 100)
    img[60:63, 10:91] = 0
    img[10:91, 70:73] = 0
    # isolated 2 px mark just above the horizontal line
    img[56:58, 40] = 0
    return ImagePixelSource(img)


# ----------------------------------------------------------------------
# Strip geometry
# ----------------------------------------------------------------------

def test_strip_is_perpendicular_to_scan_direction() -> None:
    vertical = build_strip(Point(10, 20), Direction.LEFT_RIGHT, 5)
    horizontal = build_strip(Point(10, 20), Direction.BOTTOM_TOP, 5)

    assert [p.as_tuple() for p in vertical] == [(10, 18), (10, 19), (10, 20), (10, 21), (10, 22)]
    assert [p.as_tuple() for p in horizontal] == [(8, 20), (9, 20), (10, 20), (11, 20), (12, 20)]


# ----------------------------------------------------------------------
# Classification
# ----------------------------------------------------------------------

def test_classify_mask_background_line_point() -> None:
    empty = np.zeros(15, dtype=bool)
    full = np.ones(15, dtype=bool)
    thin = np.zeros(15, dtype=bool)
    thin[6:9] = True

    assert classify_mask(empty, 3) is ProbeStatus.BACKGROUND
    assert classify_mask(full, 3) is ProbeStatus.LINE
    assert classify_mask(thin, 3) is ProbeStatus.POINT


def test_classify_mask_accepts_run_on_either_side_of_center() -> None:
    # mid = 7, line width 3 -> runs [1..7] or [7..13]
    left = np.zeros(15, dtype=bool)
    left[1:8] = True
    right = np.zeros(15, dtype=bool)
    right[7:14] = True
    short = np.zeros(15, dtype=bool)
    short[2:8] = True

    assert classify_mask(left, 3) is ProbeStatus.LINE
    assert classify_mask(right, 3) is ProbeStatus.LINE
    assert classify_mask(short, 3) is ProbeStatus.POINT


def test_classify_mask_clamps_run_to_strip() -> None:
    assert classify_mask(np.ones(5, dtype=bool), 10) is ProbeStatus.LINE


def test_classify_strip_color_tolerance_boundary(blank_image) -> None:
    img = blank_image(20, 20)
    source = ImagePixelSource(img)
    strip = build_strip(Point(10, 10), Direction.LEFT_RIGHT, 5)

    img[:, 10] = 255 - TOL
    assert classify_strip(source, strip, WHITE, TOL, 1) is ProbeStatus.LINE

    img[:, 10] = 255 - TOL + 1
    assert classify_strip(source, strip, WHITE, TOL, 1) is ProbeStatus.BACKGROUND


def test_strip_pixels_outside_image_read_as_background(blank_image) -> None:
    img = blank_image(20, 20)
    img[:, 0] = 0
    source = ImagePixelSource(img)
    # strip from y=-2 to y=2 along column 0, only 3 pixels are inside
    strip = build_strip(Point(0, 0), Direction.LEFT_RIGHT, 5)

    assert strip_mask(source, strip, WHITE, TOL).tolist() == [False, False, True, True, True]
    assert classify_strip(source, strip, WHITE, TOL, 1) is ProbeStatus.LINE


# ----------------------------------------------------------------------
# find_line
# ----------------------------------------------------------------------

@pytest.mark.parametrize("thickness, center_y", [(3, 61), (5, 62)])
def test_find_line_measures_width(blank_image, thickness: int, center_y: int) -> None:
    img = blank_image(100, 100)
    img[60:60 + thickness, :] = 0
    source = ImagePixelSource(img)

    line = find_line(source, WHITE, TOL, Point(50, 20), Direction.TOP_BOTTOM, 20)

    assert line is not None
    assert line.width == thickness
    assert line.point.as_tuple() == (50, center_y)


def test_find_line_walking_backwards(blank_image) -> None:
    img = blank_image(100, 100)
    img[60:63, :] = 0
    source = ImagePixelSource(img)

    line = find_line(source, WHITE, TOL, Point(50, 90), Direction.BOTTOM_TOP, 20)

    assert line is not None
    assert line.width == 3
    assert line.point.as_tuple() == (50, 60)


def test_find_line_vertical(blank_image) -> None:
    img = blank_image(100, 100)
    img[:, 70:73] = 0
    source = ImagePixelSource(img)

    line = find_line(source, WHITE, TOL, Point(20, 50), Direction.LEFT_RIGHT, 20)

    assert line is not None
    assert line.width == 3
    assert line.point.as_tuple() == (71, 50)


def test_find_line_absent_on_uniform_image(blank_image) -> None:
    source = ImagePixelSource(blank_image(60, 60))
    for direction in Direction:
        assert find_line(source, WHITE, TOL, Point(30, 30), direction, 20) is None


def test_find_line_absent_when_run_touches_image_edge(blank_image) -> None:
    img = blank_image(100, 100)
    img[97:, :] = 0
    source = ImagePixelSource(img)

    assert find_line(source, WHITE, TOL, Point(50, 20), Direction.TOP_BOTTOM, 20) is None


# ----------------------------------------------------------------------
# find_vertex
# ----------------------------------------------------------------------

def test_find_vertex_stops_at_crossing_line(t_junction: ImagePixelSource) -> None:
    vertex = find_vertex(t_junction, WHITE, TOL, 3, Point(20, 61), Direction.LEFT_RIGHT, 15)

    assert vertex is not None
    assert vertex.coords == (70, 61)
    assert vertex == Vertex(71, 61)


def test_find_vertex_skips_isolated_marks(t_junction: ImagePixelSource) -> None:
    # the walk passes the mark at x=40 on its way to the crossing
    vertex = find_vertex(t_junction, WHITE, TOL, 3, Point(15, 61), Direction.LEFT_RIGHT, 15)
    assert vertex is not None
    assert vertex.coords == (70, 61)


def test_find_vertex_absent_when_line_ends(t_junction: ImagePixelSource) -> None:
    assert find_vertex(t_junction, WHITE, TOL, 3, Point(20, 61), Direction.RIGHT_LEFT, 15) is None


def test_find_vertex_absent_on_open_background(t_junction: ImagePixelSource) -> None:
    assert find_vertex(t_junction, WHITE, TOL, 3, Point(30, 30), Direction.LEFT_RIGHT, 15) is None


def test_find_vertex_absent_when_start_outside_image(t_junction: ImagePixelSource) -> None:
    assert find_vertex(t_junction, WHITE, TOL, 3, Point(-5, 61), Direction.LEFT_RIGHT, 15) is None
