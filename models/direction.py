from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    The four axis-aligned scan directions.

    Each value is the unit step (dx, dy) a probe takes per iteration.
    Image coordinates grow to the right (x) and downwards (y).
    """

    LEFT_RIGHT = (1, 0)
    RIGHT_LEFT = (-1, 0)
    TOP_BOTTOM = (0, 1)
    BOTTOM_TOP = (0, -1)

    @property
    def step(self) -> Tuple[int, int]:
        return self.value

    @property
    def is_horizontal(self) -> bool:
        """True when the probe moves along x (its strip is then vertical)."""
        return self.value[1] == 0

    @property
    def orthogonal(self) -> "Direction":
        """
        Direction used to follow a line found while scanning in this one:
        horizontal scans explore upwards, vertical scans explore to the right.
        """
        if self.is_horizontal:
            return Direction.BOTTOM_TOP
        return Direction.LEFT_RIGHT

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(d.name for d in cls)
            raise ValueError(f"Unknown direction {name!r}; expected one of: {valid}") from None
