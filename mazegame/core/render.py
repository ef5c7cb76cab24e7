"""Text and JSON views of a maze grid.

``render_ascii`` draws the classic block layout: every cell occupies the odd
positions of a ``(2h+1) x (2w+1)`` character raster, and the even positions
between two cells are open only when the cells share a passage. The outer
border is always wall.
"""

from __future__ import annotations

from typing import Iterable, Optional, Set, Tuple

from .cells import Cell, Coord2D, Direction
from .grid import Grid

WALL_CHAR = "▓"
PASSAGE_CHAR = " "
PATH_CHAR = "·"


def _path_marks(path: Optional[Iterable[Cell]]) -> Tuple[Set[Coord2D], Set[Tuple[Coord2D, Direction]]]:
    cells: Set[Coord2D] = set()
    joints: Set[Tuple[Coord2D, Direction]] = set()
    if not path:
        return cells, joints
    seq = list(path)
    cells.update(c.coord for c in seq)
    for a, b in zip(seq, seq[1:]):
        d = Direction.between(a, b)
        # store each joint from its west/north side, matching the raster walk below
        if d in (Direction.EAST, Direction.SOUTH):
            joints.add((a.coord, d))
        else:
            joints.add((b.coord, d.opposite))
    return cells, joints


def render_ascii(
    grid: Grid,
    path: Optional[Iterable[Cell]] = None,
    wall: str = WALL_CHAR,
    passage: str = PASSAGE_CHAR,
    marker: str = PATH_CHAR,
) -> str:
    on_path, joints = _path_marks(path)
    border = wall * (grid.width * 2 + 1)
    lines = [border]
    for y in range(grid.height):
        row = [wall]
        below = [wall]
        for x in range(grid.width):
            cell = grid.cells[grid.index_of(x, y)]
            row.append(marker if cell.coord in on_path else passage)
            if cell.has_passage(Direction.EAST):
                row.append(marker if (cell.coord, Direction.EAST) in joints else passage)
            else:
                row.append(wall)
            if cell.has_passage(Direction.SOUTH):
                below.append(marker if (cell.coord, Direction.SOUTH) in joints else passage)
            else:
                below.append(wall)
            below.append(wall)
        lines.append("".join(row))
        lines.append(border if y == grid.height - 1 else "".join(below))
    return "\n".join(lines)


def render_coordinates(grid: Grid) -> str:
    """One text line per row listing each cell's ``(x, y)`` pair."""
    return "\n".join(
        " ".join(f"({c.x}, {c.y})" for c in grid.cells[y * grid.width:(y + 1) * grid.width])
        for y in range(grid.height)
    )


def cell_to_dict(cell: Cell) -> dict:
    out = {"x": cell.x, "y": cell.y}
    for d in Direction:
        out[d.letter] = cell.has_passage(d)
    return out


def grid_to_dict(grid: Grid) -> dict:
    return {
        "width": grid.width,
        "height": grid.height,
        "cells": [cell_to_dict(c) for c in grid.cells],
    }


__all__ = ["render_ascii", "render_coordinates", "grid_to_dict", "cell_to_dict", "WALL_CHAR", "PASSAGE_CHAR", "PATH_CHAR"]
