"""
Probe-strip pixel classification.

A probe strip is a row of `scan_width` pixels laid perpendicular to the
scan direction and centered on the probe position. Each step the strip is
classified as:

    BACKGROUND  no foreground pixel at all
    LINE        a run of 2*line_width+1 foreground pixels ending or
                starting at the strip midpoint
    POINT       some foreground, but no such run (isolated mark, or a line
                running along the scan direction)

This module provides:
    • ProbeStatus
    • build_strip()
    • classify_strip()
    • find_line()
    • find_vertex()
"""

from enum import Enum
from typing import Iterator, List, Optional

import numpy as np

from models.direction import Direction
from models.line import Line
from models.point import Point
from models.vertex import Vertex
from utils.color import RGB, is_foreground
from utils.geometry import edge_distance, midpoint
from utils.pixel_source import PixelSource
from config import get_active_params


class ProbeStatus(Enum):
    BACKGROUND = "background"
    LINE = "line"
    POINT = "point"


# ----------------------------------------------------------------------
# 1. STRIP GEOMETRY
# ----------------------------------------------------------------------

def build_strip(center: Point, direction: Direction, scan_width: int) -> List[Point]:
    """
    Pixel positions of a strip perpendicular to `direction`.

    Index scan_width // 2 is the center; index 0 is on the smaller
    coordinate side.
    """
    half = scan_width // 2
    if direction.is_horizontal:
        return [Point(center.x, center.y - half + i) for i in range(scan_width)]
    return [Point(center.x - half + i, center.y) for i in range(scan_width)]


def _in_bounds(source: PixelSource, x: int, y: int) -> bool:
    return 0 <= x < source.width and 0 <= y < source.height


def _walk(source: PixelSource, start: Point, direction: Direction) -> Iterator[Point]:
    """
    Yield successive probe centers from `start`, one pixel per step, until
    the center leaves the image along the scan axis.
    """
    dx, dy = direction.step
    center = start.copy()
    while _in_bounds(source, center.x, center.y):
        yield center
        center.step(dx, dy)


# ----------------------------------------------------------------------
# 2. CLASSIFICATION
# ----------------------------------------------------------------------

def strip_mask(source: PixelSource, strip: List[Point], background: RGB, tolerance: int) -> np.ndarray:
    """
    Boolean foreground mask for the strip. Positions outside the image
    are never sampled and count as background.
    """
    mask = np.zeros(len(strip), dtype=bool)
    for i, p in enumerate(strip):
        if _in_bounds(source, p.x, p.y):
            mask[i] = is_foreground(source.pixel_at(p.x, p.y), background, tolerance)
    return mask


def classify_mask(mask: np.ndarray, line_width: int) -> ProbeStatus:
    if not mask.any():
        return ProbeStatus.BACKGROUND

    size = len(mask)
    mid = size // 2
    reach = 2 * line_width
    lo = max(mid - reach, 0)
    hi = min(mid + reach, size - 1)

    if mask[lo:mid + 1].all() or mask[mid:hi + 1].all():
        return ProbeStatus.LINE
    return ProbeStatus.POINT


def classify_strip(
    source: PixelSource,
    strip: List[Point],
    background: RGB,
    tolerance: int,
    line_width: int,
) -> ProbeStatus:
    return classify_mask(strip_mask(source, strip, background, tolerance), line_width)


# ----------------------------------------------------------------------
# 3. LINE DISCOVERY
# ----------------------------------------------------------------------

def find_line(
    source: PixelSource,
    background: RGB,
    tolerance: int,
    start: Point,
    direction: Direction,
    scan_width: int,
) -> Optional[Line]:
    """
    Walk from `start` until the strip enters and then leaves a LINE run.

    The line width is unknown at this point, so a provisional width of
    scan_width / PROVISIONAL_WIDTH_DIVISOR drives the classification.

    Returns
    -------
    Line | None
        Line at the midpoint of both edges, width = distance between them.
        None if the walk leaves the image before the run is complete.
    """
    params = get_active_params()
    provisional_width = scan_width // params["PROVISIONAL_WIDTH_DIVISOR"]

    start_edge: Optional[Point] = None

    for center in _walk(source, start, direction):
        strip = build_strip(center, direction, scan_width)
        status = classify_strip(source, strip, background, tolerance, provisional_width)

        if status is ProbeStatus.LINE:
            if start_edge is None:
                start_edge = center.copy()
        elif start_edge is not None:
            end_edge = center.copy()
            mx, my = midpoint(start_edge.as_tuple(), end_edge.as_tuple())
            width = edge_distance(start_edge.as_tuple(), end_edge.as_tuple())
            return Line(Point(mx, my), width)

    return None


# ----------------------------------------------------------------------
# 4. VERTEX DISCOVERY
# ----------------------------------------------------------------------

def find_vertex(
    source: PixelSource,
    background: RGB,
    tolerance: int,
    line_width: int,
    start: Point,
    direction: Direction,
    scan_width: int,
) -> Optional[Vertex]:
    """
    Follow a line from `start` until a crossing line is met.

    The strip has to stay on the followed line (POINT) the whole way:
      • LINE        -> crossing found, vertex at the strip center
      • BACKGROUND  -> the line ended (or was never there), None
      • POINT       -> keep stepping
    """
    for center in _walk(source, start, direction):
        strip = build_strip(center, direction, scan_width)
        status = classify_strip(source, strip, background, tolerance, line_width)

        if status is ProbeStatus.LINE:
            return Vertex(center.x, center.y)
        if status is ProbeStatus.BACKGROUND:
            return None

    return None
