"""Per-player gameplay flags kept beside, not inside, the maze grid.

The scoring layer records which cells a player has walked over and which ones
already paid out points. Those flags are keyed by coordinate so the maze core
never sees them and path queries stay read-only against the grid.
"""

from __future__ import annotations

from typing import Set

from .core.cells import Coord2D
from .core.errors import OutOfBoundsError


class PlayerTrail:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._visited: Set[Coord2D] = set()
        self._scored: Set[Coord2D] = set()

    @classmethod
    def for_grid(cls, grid) -> "PlayerTrail":
        return cls(grid.width, grid.height)

    def _check(self, coord: Coord2D) -> Coord2D:
        try:
            x, y = coord
        except (TypeError, ValueError):
            raise OutOfBoundsError("trail coordinate must be an (x, y) pair") from None
        if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
            raise OutOfBoundsError("trail coordinate must hold integer coordinates")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(
                f"({x}, {y}) lies outside {self.width}x{self.height} trail", coord=[x, y]
            )
        return (x, y)

    def mark_visited(self, coord: Coord2D) -> None:
        self._visited.add(self._check(coord))

    def is_visited(self, coord: Coord2D) -> bool:
        return self._check(coord) in self._visited

    def mark_scored(self, coord: Coord2D) -> bool:
        """Flag ``coord`` as scored; True only the first time, so points pay out once."""
        key = self._check(coord)
        if key in self._scored:
            return False
        self._scored.add(key)
        return True

    def is_scored(self, coord: Coord2D) -> bool:
        return self._check(coord) in self._scored

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def reset(self) -> None:
        self._visited.clear()
        self._scored.clear()
