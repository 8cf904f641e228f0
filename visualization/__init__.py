"""
Visualization Tools

Provides drawing utilities for:
- Start point and vertices
- Cell outlines
- Saving the overlay per scanned image
"""

from .draw_table import draw_start_point, draw_vertices, draw_cells, draw_scan
from .save_outputs import save_overlay, save_all_outputs

__all__ = [
    "draw_start_point",
    "draw_vertices",
    "draw_cells",
    "draw_scan",
    "save_overlay",
    "save_all_outputs",
]
