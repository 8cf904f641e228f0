"""
RGB tolerance comparison.

Two colors are the same when every channel differs by less than the
tolerance; a difference of exactly `tolerance` already counts as foreground.
"""

from typing import Tuple

RGB = Tuple[int, int, int]


def colors_match(color: RGB, reference: RGB, tolerance: int) -> bool:
    return (
        abs(int(color[0]) - int(reference[0])) < tolerance
        and abs(int(color[1]) - int(reference[1])) < tolerance
        and abs(int(color[2]) - int(reference[2])) < tolerance
    )


def is_foreground(color: RGB, background: RGB, tolerance: int) -> bool:
    return not colors_match(color, background, tolerance)
