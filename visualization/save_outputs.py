"""
Centralized output-saving utilities for the table scanner.

This module provides:
    • save_overlay(...)
    • save_all_outputs(...)

Uses draw_table to render and utils.image_io for filesystem handling.
"""

from typing import List

import numpy as np

from models.cell import Cell
from models.point import Point
from models.vertex import Vertex
from visualization.draw_table import draw_scan
from utils.image_io import save_image, ensure_output_dir


def save_overlay(
    path: str,
    base_image: np.ndarray,
    start: Point,
    vertices: List[Vertex],
    cells: List[Cell],
) -> bool:
    """
    Draw the scan result on a copy of the base image and save it.
    """
    vis = base_image.copy()
    if vis.ndim == 2:
        vis = np.dstack([vis, vis, vis])
    draw_scan(vis, start, vertices, cells)
    return save_image(path, vis)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    image_id: str,
    base_image: np.ndarray,
    start: Point,
    vertices: List[Vertex],
    cells: List[Cell],
):
    """
    Saves every output artifact for one scanned image:

        <id>_overlay.png
    """
    ensure_output_dir(output_dir)

    save_overlay(
        f"{output_dir}/{image_id}_overlay.png",
        base_image,
        start,
        vertices,
        cells,
    )
