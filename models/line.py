from dataclasses import dataclass

from models.point import Point


@dataclass(frozen=True)
class Line:
    """
    A table border crossed by the probe.

    point: midpoint between the two detected edges
    width: distance between those edges in whole pixels (always >= 1)
    """

    point: Point
    width: int

    def __repr__(self):
        return f"Line(point=({self.point.x}, {self.point.y}), width={self.width})"
