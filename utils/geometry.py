"""
This module provides:
    - quantize
    - is_near
    - midpoint
    - edge_distance

Pure helpers shared by the vertex model and the line probe. Keeping the
proximity rule here lets deduplication be tested without a graph.
"""

import math
from typing import Tuple

from config import VERTEX_TOLERANCE


# ----------------------------------------------------------------------
#  QUANTIZATION (VERTEX HASHING)
# ----------------------------------------------------------------------

def quantize(value: int, grid: int = VERTEX_TOLERANCE) -> int:
    """
    Round a coordinate to the nearest multiple of `grid`.

    Halves round up (15 -> 20, -15 -> -10), not to even as round() does.
    """
    return int(math.floor(value / grid + 0.5)) * grid


# ----------------------------------------------------------------------
#  PROXIMITY TEST (VERTEX EQUALITY)
# ----------------------------------------------------------------------

def is_near(p1: Tuple[int, int], p2: Tuple[int, int], tolerance: int = VERTEX_TOLERANCE) -> bool:
    """
    True if both coordinate deltas are strictly below `tolerance`.

    Reflexive and symmetric but not transitive: (0, 0) ~ (9, 0) ~ (18, 0)
    while (0, 0) and (18, 0) are apart.
    """
    return abs(p1[0] - p2[0]) < tolerance and abs(p1[1] - p2[1]) < tolerance


# ----------------------------------------------------------------------
#  LINE EDGE MEASUREMENT
# ----------------------------------------------------------------------

def midpoint(p1: Tuple[int, int], p2: Tuple[int, int]) -> Tuple[int, int]:
    """Integer midpoint, truncated toward zero."""
    return int((p1[0] + p2[0]) / 2), int((p1[1] + p2[1]) / 2)


def edge_distance(p1: Tuple[int, int], p2: Tuple[int, int]) -> int:
    """Euclidean distance between two edge centers, truncated to whole pixels."""
    return int(math.dist(p1, p2))
