"""
Utility Functions

Provides proximity geometry, color comparison, the pixel-source boundary
and image I/O used across detectors.
"""

from .geometry import quantize, is_near, midpoint, edge_distance
from .color import colors_match, is_foreground
from .pixel_source import PixelSource, ImagePixelSource
from .image_io import load_images, extract_numeric_id, ensure_output_dir, save_image

__all__ = [
    "quantize",
    "is_near",
    "midpoint",
    "edge_distance",
    "colors_match",
    "is_foreground",
    "PixelSource",
    "ImagePixelSource",
    "load_images",
    "extract_numeric_id",
    "ensure_output_dir",
    "save_image",
]
