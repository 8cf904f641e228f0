from __future__ import annotations

from typing import Callable

import numpy as np
import pytest

WHITE = 255
BLACK = 0


def _blank(width: int, height: int) -> np.ndarray:
    return np.full((height, width, 3), WHITE, dtype=np.uint8)


def hline(img: np.ndarray, y: int, x0: int, x1: int, thickness: int = 3) -> None:
    """Horizontal line covering rows y..y+thickness-1 and columns x0..x1."""
    img[y:y + thickness, x0:x1 + 1] = BLACK


def vline(img: np.ndarray, x: int, y0: int, y1: int, thickness: int = 3) -> None:
    """Vertical line covering columns x..x+thickness-1 and rows y0..y1."""
    img[y0:y1 + 1, x:x + thickness] = BLACK


@pytest.fixture
def blank_image() -> Callable[[int, int], np.ndarray]:
    return _blank


@pytest.fixture
def rect_image() -> np.ndarray:
    """
    200x200, one closed rectangle with 3 px borders:
    top rows 40-42, bottom rows 150-152, left cols 30-32, right cols 160-162.
    """
    img = _blank(200, 200)
    hline(img, 40, 30, 162)
    hline(img, 150, 30, 162)
    vline(img, 30, 40, 152)
    vline(img, 160, 40, 152)
    return img


@pytest.fixture
def grid_image() -> np.ndarray:
    """
    220x220, three horizontal and three vertical 3 px lines forming 2x2
    cells: rows at y=40/100/160, columns at x=30/100/170.
    """
    img = _blank(220, 220)
    for y in (40, 100, 160):
        hline(img, y, 30, 172)
    for x in (30, 100, 170):
        vline(img, x, 40, 162)
    return img


@pytest.fixture
def single_line_image() -> np.ndarray:
    """200x200 with one horizontal line (rows 100-102, x 20-180) and nothing crossing it."""
    img = _blank(200, 200)
    hline(img, 100, 20, 180)
    return img
