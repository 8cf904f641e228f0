from typing import Tuple

from models.vertex import Vertex


class Cell:
    """
    Quadrilateral table cell bounded by four intersections.

    Corners are canonicalized on construction:
      • sort by x, then stable sort by y
      • first two vertices form the top row, last two the bottom row
      • left/right is decided by x inside each row

    Equality compares the four corners with Vertex equality, so the same
    cell reached from different starting vertices compares equal.
    """

    def __init__(self, cell_id: int, *vertices: Vertex):
        if len(vertices) != 4:
            raise ValueError(f"A cell needs exactly 4 vertices, got {len(vertices)}")
        for i in range(4):
            for j in range(i + 1, 4):
                if vertices[i] == vertices[j]:
                    raise ValueError(f"Duplicate cell corners: {vertices[i]} and {vertices[j]}")

        self.id = cell_id

        ordered = sorted(vertices, key=lambda v: v.x)
        ordered.sort(key=lambda v: v.y)

        top = sorted(ordered[:2], key=lambda v: v.x)
        bottom = sorted(ordered[2:], key=lambda v: v.x)

        self.top_left, self.top_right = top
        self.bottom_left, self.bottom_right = bottom

    @property
    def corners(self) -> Tuple[Vertex, Vertex, Vertex, Vertex]:
        """(top_left, top_right, bottom_left, bottom_right)"""
        return self.top_left, self.top_right, self.bottom_left, self.bottom_right

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """(x0, y0, x1, y1) rectangle spanned by top-left and bottom-right."""
        return self.top_left.x, self.top_left.y, self.bottom_right.x, self.bottom_right.y

    def contains(self, x: int, y: int) -> bool:
        x0, y0, x1, y1 = self.bounds
        return x0 <= x < x1 and y0 <= y < y1

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.corners == other.corners

    def __hash__(self):
        return hash(self.corners)

    def __repr__(self):
        return (
            f"Cell(id={self.id}, tl={self.top_left.coords}, tr={self.top_right.coords}, "
            f"bl={self.bottom_left.coords}, br={self.bottom_right.coords})"
        )
