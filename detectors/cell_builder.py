"""
Cell reconstruction from the intersection graph.

This module provides:
    • find_cells()
    • find_cell_at()

find_cells() enumerates 4-cycles V - N1 - X - N2 - V. On a rectilinear grid
every such cycle is one cell. The four vertices are not checked for forming
a minimal planar face, so irregular layouts can yield a cycle that spans
more than one real cell.
"""

from itertools import combinations
from typing import List, Optional

from models.cell import Cell
from models.vertex_graph import VertexGraph


def find_cells(graph: VertexGraph) -> List[Cell]:
    """
    Returns
    -------
    list[Cell]
        Cells in discovery order, with ids 1..n. Structurally equal cells
        found from other corners are dropped.
    """
    cells: List[Cell] = []

    for v in range(len(graph)):
        vertex = graph.vertices[v]

        for n1, n2 in combinations(graph.neighbors(v), 2):
            if graph.vertices[n1] == graph.vertices[n2]:
                continue

            far1 = [nn for nn in graph.neighbors(n1) if graph.vertices[nn] != vertex]
            far2 = [nn for nn in graph.neighbors(n2) if graph.vertices[nn] != vertex]

            for nn1 in far1:
                for nn2 in far2:
                    if graph.vertices[nn1] != graph.vertices[nn2]:
                        continue

                    corners = (vertex, graph.vertices[n1], graph.vertices[n2], graph.vertices[nn1])
                    cell = Cell(len(cells) + 1, *corners)
                    if cell not in cells:
                        cells.append(cell)

    return cells


def find_cell_at(cells: List[Cell], x: int, y: int) -> Optional[Cell]:
    """
    First cell whose top-left/bottom-right rectangle contains (x, y).
    """
    for cell in cells:
        if cell.contains(x, y):
            return cell
    return None
