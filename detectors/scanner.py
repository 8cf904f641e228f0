"""
Table scanner: finds the cells of a ruled table in a raster image.

Pipeline for one scan:
  1. Sample the background color at the start point
  2. Walk in the initial direction until a table line is crossed
     and measure its width
  3. Follow that line orthogonally to its first crossing (seed vertex)
  4. Breadth-first exploration of all connected crossings
  5. Enumerate cells from the intersection graph

Nothing found at step 2 or 3 is a valid outcome and yields no cells.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from models.cell import Cell
from models.direction import Direction
from models.line import Line
from models.point import Point
from models.vertex_graph import VertexGraph
from detectors.line_probe import find_line, find_vertex
from detectors.graph_explorer import explore
from detectors.cell_builder import find_cells
from utils.pixel_source import PixelSource
from visualization.draw_table import draw_scan
from config import get_active_params


@dataclass
class ScanResult:
    line: Optional[Line] = None
    graph: VertexGraph = field(default_factory=VertexGraph)
    cells: List[Cell] = field(default_factory=list)


class Scanner:
    """
    color_tolerance: per-channel difference below which a pixel counts as
    background. verbose: print [SCAN] trace lines.
    """

    def __init__(self, color_tolerance: Optional[int] = None, verbose: Optional[bool] = None):
        params = get_active_params()
        if color_tolerance is None:
            color_tolerance = params["COLOR_TOLERANCE"]
        if color_tolerance < 0:
            raise ValueError(f"color_tolerance must be >= 0, got {color_tolerance}")

        self.color_tolerance = int(color_tolerance)
        self.verbose = params["VERBOSE"] if verbose is None else verbose

    def _log(self, message: str):
        if self.verbose:
            print(f"[SCAN] {message}")

    # ------------------------------------------------------------------
    # Full pipeline
    # ------------------------------------------------------------------

    def scan_graph(self, source: PixelSource, start: Point, direction: Direction) -> ScanResult:
        """
        Run the scan and keep every intermediate product (line, graph).
        """
        if not (0 <= start.x < source.width and 0 <= start.y < source.height):
            raise ValueError(
                f"Start point ({start.x}, {start.y}) outside image {source.width}x{source.height}"
            )

        params = get_active_params()
        result = ScanResult()

        background = source.pixel_at(start.x, start.y)
        self._log(f"bg: {background}")

        line = find_line(
            source, background, self.color_tolerance, start, direction,
            params["INITIAL_SCAN_WIDTH"],
        )
        if line is None:
            self._log("No line found")
            return result
        result.line = line
        self._log(f"Found line, width: {line.width}")

        line_width = line.width
        scan_width = params["SCAN_WIDTH_FACTOR"] * line_width

        first_vertex = find_vertex(
            source, background, self.color_tolerance, line_width,
            line.point, direction.orthogonal, scan_width,
        )
        if first_vertex is None:
            self._log("No vertex found along the line")
            return result

        result.graph = explore(
            source, background, self.color_tolerance, line_width, first_vertex, scan_width,
        )
        self._log(f"Found vertices: {len(result.graph)}")

        result.cells = find_cells(result.graph)
        self._log(f"Found cells: {len(result.cells)}")

        return result

    def scan(
        self,
        source: PixelSource,
        start: Point,
        direction: Direction,
        draw_cells: bool = False,
        draw_vertices: bool = False,
        canvas: Optional[np.ndarray] = None,
    ) -> List[Cell]:
        """
        Finds table cells in the image behind `source`.

        Parameters
        ----------
        source : PixelSource
            Image to scan.
        start : Point
            Background pixel to start from; its color is the background.
        direction : Direction
            Initial direction to search for a table line.
        draw_cells, draw_vertices : bool
            Decorate `canvas` (BGR image, modified in place) with the
            result. Ignored without a canvas; never change the result.

        Returns
        -------
        list[Cell]
            Cells in discovery order; empty when no table was found.
        """
        result = self.scan_graph(source, start, direction)

        if canvas is not None and (draw_cells or draw_vertices):
            draw_scan(
                canvas, start, result.graph.vertices, result.cells,
                with_vertices=draw_vertices, with_cells=draw_cells,
            )

        return result.cells
