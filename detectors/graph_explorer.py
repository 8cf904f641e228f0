"""
Breadth-first discovery of the table's intersection graph.

Starting from one confirmed vertex, every vertex popped from the frontier is
probed in the four axis directions. Each probe starts FOOTPRINT_FACTOR *
line_width pixels away so it clears the crossing the vertex sits on.
"""

from collections import deque
from typing import Deque, List

from models.direction import Direction
from models.point import Point
from models.vertex import Vertex
from models.vertex_graph import VertexGraph
from detectors.line_probe import find_vertex
from utils.color import RGB
from utils.pixel_source import PixelSource
from config import get_active_params


# probe order per expanded vertex: down, up, right, left
PROBE_DIRECTIONS = (
    Direction.TOP_BOTTOM,
    Direction.BOTTOM_TOP,
    Direction.LEFT_RIGHT,
    Direction.RIGHT_LEFT,
)


def _register(graph: VertexGraph, found: Vertex, expanded: List[int], frontier: Deque[int]) -> int:
    """
    Return the arena index for `found`, reusing an existing vertex when one
    is equal by proximity. Expanded vertices are checked before queued ones.
    New vertices are appended to the frontier.
    """
    idx = graph.find(found, among=iter(expanded))
    if idx is None:
        idx = graph.find(found, among=iter(frontier))
    if idx is None:
        idx = graph.add(found)
        frontier.append(idx)
    return idx


def explore(
    source: PixelSource,
    background: RGB,
    tolerance: int,
    line_width: int,
    first_vertex: Vertex,
    scan_width: int,
) -> VertexGraph:
    """
    Build the full intersection graph reachable from `first_vertex`.

    Guarantees:
      - every vertex is expanded exactly once
      - links are symmetric
      - near-duplicate detections collapse into one vertex

    Returns
    -------
    VertexGraph
        Arena order equals expansion order.
    """
    params = get_active_params()
    reach = params["FOOTPRINT_FACTOR"] * line_width

    graph = VertexGraph()
    frontier: Deque[int] = deque([graph.add(first_vertex)])
    expanded: List[int] = []

    while frontier:
        current = frontier.popleft()
        vertex = graph.vertices[current]
        # counted as expanded while probing, so a probe that lands back on
        # its own crossing reuses it
        expanded.append(current)

        for direction in PROBE_DIRECTIONS:
            dx, dy = direction.step
            start = Point(vertex.x + dx * reach, vertex.y + dy * reach)

            found = find_vertex(source, background, tolerance, line_width, start, direction, scan_width)
            if found is None:
                continue

            other = _register(graph, found, expanded, frontier)
            graph.link(current, other)

    return graph
