"""
Detectors Package

Contains the scanning stages:
- Probe-strip classification, line and vertex discovery
- Breadth-first exploration of the intersection graph
- Cell reconstruction
- The Scanner that runs them in order
"""

from .line_probe import (
    ProbeStatus,
    build_strip,
    strip_mask,
    classify_mask,
    classify_strip,
    find_line,
    find_vertex,
)
from .graph_explorer import explore
from .cell_builder import find_cells, find_cell_at
from .scanner import Scanner, ScanResult

__all__ = [
    "ProbeStatus",
    "build_strip",
    "strip_mask",
    "classify_mask",
    "classify_strip",
    "find_line",
    "find_vertex",
    "explore",
    "find_cells",
    "find_cell_at",
    "Scanner",
    "ScanResult",
]
