from enum import IntEnum
from typing import List, Optional, Tuple


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    @property
    def letter(self) -> str:
        return self.name[0].lower()

    @classmethod
    def between(cls, a: "Cell", b: "Cell") -> "Direction":
        """Direction to step from ``a`` to the axis-adjacent cell ``b``."""
        step = (b.x - a.x, b.y - a.y)
        for d, delta in _DELTAS.items():
            if delta == step:
                return d
        raise ValueError(f"cells {a.coord} and {b.coord} are not adjacent")


# Screen orientation: y grows downward, so north is y - 1.
_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

Coord2D = Tuple[int, int]


class Cell:
    """Grid node: fixed coordinates plus four optional links into the grid arena."""

    __slots__ = ("x", "y", "edges", "in_maze")

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.edges: List[Optional[int]] = [None, None, None, None]
        self.in_maze = False

    @property
    def coord(self) -> Coord2D:
        return (self.x, self.y)

    def link(self, direction: Direction) -> Optional[int]:
        return self.edges[direction]

    def has_passage(self, direction: Direction) -> bool:
        return self.edges[direction] is not None

    def passages(self) -> List[Direction]:
        return [d for d in Direction if self.edges[d] is not None]

    def __repr__(self):
        open_dirs = "".join(d.letter for d in self.passages()) or "-"
        return f"Cell({self.x}, {self.y}, {open_dirs})"


__all__ = ["Cell", "Coord2D", "Direction"]
