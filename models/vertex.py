from typing import Tuple

from utils.geometry import is_near, quantize


class Vertex:
    """
    Intersection of two table lines.

    Identity is by proximity:
      • two vertices are equal when both coordinate deltas are < 10 px
      • the hash uses coordinates quantized to the nearest multiple of 10

    Repeated detections of one physical crossing therefore coalesce, even
    though they usually land a line-width apart.

    Notes:
      • Equality is not transitive at cluster boundaries, see is_near().
      • Two equal vertices can still hash differently when they straddle a
        quantization boundary (14 vs 16), so lookups that must not miss a
        duplicate scan by equality instead of relying on the hash alone.
      • Adjacency lives in VertexGraph, not on the vertex.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int):
        self.x = int(x)
        self.y = int(y)

    @property
    def coords(self) -> Tuple[int, int]:
        return self.x, self.y

    # ------------------------------------------------------------------
    # Equality & hashing (by proximity)
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return is_near(self.coords, other.coords)

    def __hash__(self):
        return (quantize(self.x) << 10) + quantize(self.y)

    def __repr__(self):
        return f"Vertex({self.x}, {self.y})"
