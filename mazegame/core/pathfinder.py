"""Path queries over a generated maze.

The maze is a tree, so any two cells are joined by exactly one simple path.
``find_path`` walks open passages breadth-first and never mutates the grid,
so concurrent read-only queries are safe.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence

from .cells import Cell, Coord2D, Direction
from .errors import DisconnectedError, OutOfBoundsError
from .grid import Grid


def _resolve(grid: Grid, coord, label: str) -> Cell:
    try:
        x, y = coord
    except (TypeError, ValueError):
        raise OutOfBoundsError(f"{label} must be an (x, y) pair", field=label) from None
    if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
        raise OutOfBoundsError(f"{label} must hold integer coordinates", field=label)
    if not grid.in_bounds(x, y):
        raise OutOfBoundsError(
            f"{label} ({x}, {y}) lies outside {grid.width}x{grid.height} grid",
            field=label,
            coord=[x, y],
        )
    return grid.cells[grid.index_of(x, y)]


def find_path(grid: Grid, start: Coord2D, end: Coord2D) -> List[Cell]:
    """Return the cells from ``start`` to ``end`` inclusive.

    Raises OutOfBoundsError for coordinates outside the grid and
    DisconnectedError when no passage route exists.
    """
    src = _resolve(grid, start, "start")
    dst = _resolve(grid, end, "end")
    if src is dst:
        return [src]
    prev: Dict[int, Optional[Cell]] = {id(src): None}
    q = deque([src])
    found = False
    while q:
        cur = q.popleft()
        if cur is dst:
            found = True
            break
        for nxt in grid.linked_neighbors(cur):
            if id(nxt) not in prev:
                prev[id(nxt)] = cur
                q.append(nxt)
    if not found:
        raise DisconnectedError(
            f"no passage route from {src.coord} to {dst.coord}",
            start=list(src.coord),
            end=list(dst.coord),
        )
    path = [dst]
    step = prev[id(dst)]
    while step is not None:
        path.append(step)
        step = prev[id(step)]
    path.reverse()
    return path


def path_coords(path: Sequence[Cell]) -> List[Coord2D]:
    return [c.coord for c in path]


def path_directions(path: Sequence[Cell]) -> List[Direction]:
    """Step directions along ``path`` (one fewer than its length), for hint arrows."""
    return [Direction.between(a, b) for a, b in zip(path, path[1:])]


def distance(grid: Grid, start: Coord2D, end: Coord2D) -> int:
    return len(find_path(grid, start, end)) - 1


__all__ = ["find_path", "path_coords", "path_directions", "distance"]
