from typing import Iterator, List, Optional, Set

from models.vertex import Vertex


class VertexGraph:
    """
    Intersection graph stored as an arena.

    Vertices live in a flat list; neighbor sets hold integer indices into
    that list, so there are no vertex-to-vertex back references. Links are
    always added in both directions.

    Supports:
      - proximity-based lookup of an existing vertex
      - symmetric linking
      - neighbor and degree queries by index or by vertex
    """

    def __init__(self):
        self.vertices: List[Vertex] = []
        self.neighbor_ids: List[Set[int]] = []

    # ------------------------------------------------------------------
    # Arena
    # ------------------------------------------------------------------

    def add(self, vertex: Vertex) -> int:
        self.vertices.append(vertex)
        self.neighbor_ids.append(set())
        return len(self.vertices) - 1

    def find(self, vertex: Vertex, among: Optional[Iterator[int]] = None) -> Optional[int]:
        """
        Index of the first stored vertex equal (by proximity) to `vertex`.

        `among` restricts and orders the candidate indices; by default the
        whole arena is searched in insertion order.
        """
        candidates = range(len(self.vertices)) if among is None else among
        for idx in candidates:
            if self.vertices[idx] == vertex:
                return idx
        return None

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def link(self, a: int, b: int):
        """Make a and b mutual neighbors. Self links are ignored."""
        if a == b:
            return
        self.neighbor_ids[a].add(b)
        self.neighbor_ids[b].add(a)

    def neighbors(self, idx: int) -> List[int]:
        # sorted so enumeration order does not depend on set iteration order
        return sorted(self.neighbor_ids[idx])

    def degree(self, idx: int) -> int:
        return len(self.neighbor_ids[idx])

    def neighbors_of(self, vertex: Vertex) -> List[Vertex]:
        idx = self.find(vertex)
        if idx is None:
            return []
        return [self.vertices[n] for n in self.neighbors(idx)]

    def degree_of(self, vertex: Vertex) -> int:
        idx = self.find(vertex)
        return 0 if idx is None else self.degree(idx)

    def is_symmetric(self) -> bool:
        return all(
            a in self.neighbor_ids[b]
            for a in range(len(self.vertices))
            for b in self.neighbor_ids[a]
        )

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self):
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __repr__(self):
        edges = sum(len(n) for n in self.neighbor_ids) // 2
        return f"VertexGraph(vertices={len(self.vertices)}, edges={edges})"
