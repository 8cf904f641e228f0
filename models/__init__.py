"""
Data Models

Defines the core data structures:
- Point, Direction
- Line
- Vertex, VertexGraph
- Cell
"""

from .point import Point
from .direction import Direction
from .line import Line
from .vertex import Vertex
from .vertex_graph import VertexGraph
from .cell import Cell

__all__ = ["Point", "Direction", "Line", "Vertex", "VertexGraph", "Cell"]
