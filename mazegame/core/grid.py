"""Grid arena owning every Cell of a maze.

Cells live in a flat list indexed by ``y * width + x``; edge slots store
indices into that list instead of object references, so the grid is the only
owner of its cells and links never form reference cycles.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Set, Tuple

from .cells import Cell, Coord2D, Direction
from .errors import ConfigurationError, OutOfBoundsError


def _check_dimension(name: str, value) -> int:
    # bool is an int subclass; True must not pass as a width of 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer", field=name, value=repr(value))
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive", field=name, value=value)
    return value


class Grid:
    def __init__(self, width: int, height: int):
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", height)
        self.cells: List[Cell] = [Cell(x, y) for y in range(height) for x in range(width)]

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def __len__(self):
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        return y * self.width + x

    def cell_at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"({x}, {y}) lies outside {self.width}x{self.height} grid", coord=[x, y]
            )
        return self.cells[y * self.width + x]

    def adjacent(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Axis-adjacent cell in ``direction`` whether or not a passage exists."""
        dx, dy = direction.delta
        nx, ny = cell.x + dx, cell.y + dy
        if not self.in_bounds(nx, ny):
            return None
        return self.cells[ny * self.width + nx]

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Cell linked through ``direction``'s edge slot, or None for a wall."""
        idx = cell.edges[direction]
        return None if idx is None else self.cells[idx]

    def linked_neighbors(self, cell: Cell) -> Iterator[Cell]:
        for idx in cell.edges:
            if idx is not None:
                yield self.cells[idx]

    def connect(self, a: Cell, b: Cell) -> Direction:
        """Link two axis-adjacent cells through their facing slots.

        Returns the direction from ``a`` to ``b``.
        """
        direction = Direction.between(a, b)
        a.edges[direction] = self.index_of(b.x, b.y)
        b.edges[direction.opposite] = self.index_of(a.x, a.y)
        return direction

    def edges(self) -> Set[Tuple[Coord2D, Coord2D]]:
        """Undirected edge set as sorted coordinate pairs."""
        out = set()
        for cell in self.cells:
            for other in self.linked_neighbors(cell):
                out.add(tuple(sorted((cell.coord, other.coord))))
        return out

    def edge_count(self) -> int:
        return sum(1 for c in self.cells for idx in c.edges if idx is not None) // 2

    @property
    def is_pristine(self) -> bool:
        return not any(c.in_maze or any(idx is not None for idx in c.edges) for c in self.cells)

    @property
    def is_generated(self) -> bool:
        return all(c.in_maze for c in self.cells)

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, edges={self.edge_count()})"


def new_grid(width: int, height: int) -> Grid:
    """Allocate an empty ``width`` x ``height`` grid with no passages."""
    return Grid(width, height)


__all__ = ["Grid", "new_grid"]
