"""
Visualization utilities for rendering scan results.

This module provides:
    • draw_start_point(img, start)
    • draw_vertices(img, vertices)
    • draw_cells(img, cells)
    • draw_scan(img, start, vertices, cells, ...)

All functions draw in place on a BGR image and return it.
"""

from typing import Iterable

import cv2
import numpy as np

from models.cell import Cell
from models.point import Point
from models.vertex import Vertex
from config import COLOR_CELL, COLOR_START, COLOR_VERTEX


def draw_start_point(image: np.ndarray, start: Point):
    cv2.circle(image, (int(start.x), int(start.y)), 5, COLOR_START, thickness=1)
    return image


def draw_vertices(image: np.ndarray, vertices: Iterable[Vertex]):
    for v in vertices:
        cv2.circle(image, (int(v.x), int(v.y)), 3, COLOR_VERTEX, thickness=2)
    return image


# ---------------------------------------------------------------------
#  Cell outlines: TL -> TR -> BR -> BL -> TL
# ---------------------------------------------------------------------

def draw_cells(image: np.ndarray, cells: Iterable[Cell], thickness: int = 2):
    for cell in cells:
        outline = (cell.top_left, cell.top_right, cell.bottom_right, cell.bottom_left)
        for a, b in zip(outline, outline[1:] + outline[:1]):
            cv2.line(image, (a.x, a.y), (b.x, b.y), COLOR_CELL, thickness)
    return image


def draw_scan(
    image: np.ndarray,
    start: Point,
    vertices: Iterable[Vertex],
    cells: Iterable[Cell],
    with_vertices: bool = True,
    with_cells: bool = True,
):
    """
    Full overlay for one scan: start marker, then vertices and/or cells.
    """
    draw_start_point(image, start)
    if with_vertices:
        draw_vertices(image, vertices)
    if with_cells:
        draw_cells(image, cells)
    return image
