from typing import List

import numpy as np

from models.cell import Cell
from models.direction import Direction
from models.point import Point
from detectors.scanner import Scanner
from utils.image_io import load_images, ensure_output_dir
from utils.pixel_source import ImagePixelSource
from visualization.save_outputs import save_all_outputs

from config import (
    SELECTED_IMAGE_PATTERN,
    OUTPUT_FOLDER,
    START_POINT_RATIO,
    START_DIRECTION,
    get_active_params,
)


def start_point_for(source: ImagePixelSource) -> Point:
    rx, ry = START_POINT_RATIO
    x = min(int(rx * source.width), source.width - 1)
    y = min(int(ry * source.height), source.height - 1)
    return Point(x, y)


def process_image(image: np.ndarray, image_name: str) -> List[Cell]:
    """
    Runs the complete scan for one page image:
      1. Wrap the pixels
      2. Scan from the configured start point and direction
      3. Save the overlay (start point, vertices, cells)
    """

    print(f"\n=== Processing image with name: {image_name} ===")
    params = get_active_params()

    source = ImagePixelSource(image)
    start = start_point_for(source)
    direction = Direction.from_name(START_DIRECTION)

    scanner = Scanner(params["COLOR_TOLERANCE"], verbose=params["VERBOSE"])
    result = scanner.scan_graph(source, start, direction)

    if not result.cells:
        print(f"[WARN] No table found in {image_name}.")
    else:
        for cell in result.cells:
            print(f"  {cell}")

    save_all_outputs(
        output_dir=OUTPUT_FOLDER,
        image_id=image_name,
        base_image=image,
        start=start,
        vertices=result.graph.vertices,
        cells=result.cells,
    )

    print(f"[OK] Finished {image_name}: {len(result.graph)} vertices, {len(result.cells)} cells")
    return result.cells


def main():
    """
    Main entry point:
      - Loads images
      - Scans each one independently
      - Saves overlay files
    """
    ensure_output_dir(OUTPUT_FOLDER)

    images, names = load_images(SELECTED_IMAGE_PATTERN)
    if not images:
        print(f"[ERROR] No images matched pattern: {SELECTED_IMAGE_PATTERN}")
        return

    for img, name in zip(images, names):
        process_image(img, name)

    print("\n=== All images processed ===")


if __name__ == "__main__":
    main()
