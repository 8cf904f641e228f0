"""
Image I/O utilities for the table scanner.

This module provides:
    • load_images(path_pattern)
    • extract_numeric_id(filename)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction so the scanner only sees pixel arrays.
"""

import os
import re
import glob
from typing import List, Tuple

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_numeric_id(filename: str) -> str:
    """
    Extract the first integer found in the file's base name, falling back
    to the stem when there is none.

    Example:
        'selected/invoice_038.png' → '038'
        'selected/invoice.png'     → 'invoice'
    """
    base = os.path.basename(filename)
    m = re.search(r'\d+', base)
    if m:
        return m.group(0)
    return os.path.splitext(base)[0]


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_images(path_pattern: str) -> Tuple[List[np.ndarray], List[str]]:
    """
    Loads all page images matching the given glob pattern.

    Returns:
        images:  list of np.ndarray (BGR)
        names:   list of identifiers extracted from filenames

    Files OpenCV cannot decode are reported and skipped.
    """

    file_list = sorted(glob.glob(path_pattern))
    images = []
    names = []

    for fname in file_list:
        img = cv2.imread(fname, cv2.IMREAD_COLOR)
        if img is None:
            print(f"[WARN] Could not read image: {fname}")
            continue
        images.append(img)
        names.append(extract_numeric_id(fname))

    return images, names


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray) -> bool:
    """
    Save an image to disk, ensuring the directory exists.
    Returns cv2.imwrite's success flag.
    """
    ensure_output_dir(os.path.dirname(path))
    return bool(cv2.imwrite(path, image))
