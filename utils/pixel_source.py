"""
Pixel access boundary for the scanner.

This module provides:
    • PixelSource       (protocol the scanner consumes)
    • ImagePixelSource  (adapter over an OpenCV/numpy image array)

The scanner never decodes or renders anything itself; it only asks a
PixelSource for its size and for single RGB pixels.
"""

from typing import Protocol, Tuple

import numpy as np

RGB = Tuple[int, int, int]


class PixelSource(Protocol):
    width: int
    height: int

    def pixel_at(self, x: int, y: int) -> RGB:
        ...


class ImagePixelSource:
    """
    Read-only view of an image array.

    Accepts the layouts cv2.imread produces:
      - (H, W, 3) BGR
      - (H, W, 4) BGRA (alpha ignored)
      - (H, W)    grayscale
    """

    def __init__(self, image: np.ndarray):
        if image.ndim not in (2, 3):
            raise ValueError(f"Unsupported image shape: {image.shape}")
        if image.ndim == 3 and image.shape[2] not in (3, 4):
            raise ValueError(f"Unsupported channel count: {image.shape[2]}")

        self.image = image
        self.height, self.width = image.shape[:2]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_at(self, x: int, y: int) -> RGB:
        px = self.image[y, x]
        if self.image.ndim == 2:
            v = int(px)
            return v, v, v
        # BGR -> RGB
        return int(px[2]), int(px[1]), int(px[0])

    def __repr__(self):
        return f"ImagePixelSource({self.width}x{self.height})"
