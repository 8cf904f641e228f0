from dataclasses import dataclass
from typing import Tuple


@dataclass
class Point:
    """
    Integer pixel coordinate.

    Mutable so a probe can step it in place; results store a copy().
    """

    x: int
    y: int

    def step(self, dx: int, dy: int):
        self.x += dx
        self.y += dy

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.y
