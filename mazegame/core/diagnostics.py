"""Structural checks for a generated maze.

``analyze`` inspects a grid without mutating it and reports every way it falls
short of a perfect maze. Tests and ``scripts/diagnose_seeds.py`` rely on it.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, List

from .cells import Direction
from .grid import Grid


def flood_reachable(grid: Grid, x: int = 0, y: int = 0) -> int:
    start = grid.cell_at(x, y)
    seen = {id(start)}
    q = deque([start])
    while q:
        cur = q.popleft()
        for nxt in grid.linked_neighbors(cur):
            if id(nxt) not in seen:
                seen.add(id(nxt))
                q.append(nxt)
    return len(seen)


def analyze(grid: Grid) -> Dict[str, Any]:
    asymmetric: List[List[int]] = []
    duplicates: List[List[int]] = []
    for cell in grid:
        targets = [idx for idx in cell.edges if idx is not None]
        if len(targets) != len(set(targets)):
            duplicates.append([cell.x, cell.y])
        for d in Direction:
            other = grid.neighbor(cell, d)
            if other is None:
                continue
            expected = grid.adjacent(cell, d)
            if other is not expected or grid.neighbor(other, d.opposite) is not cell:
                asymmetric.append([cell.x, cell.y, int(d)])
    edges = grid.edge_count()
    expected_edges = len(grid) - 1
    unreachable = len(grid) - flood_reachable(grid)
    not_in_maze = sum(1 for c in grid if not c.in_maze)
    ok = (
        edges == expected_edges
        and not asymmetric
        and not duplicates
        and unreachable == 0
        and not_in_maze == 0
    )
    return {
        "width": grid.width,
        "height": grid.height,
        "edges": edges,
        "expected_edges": expected_edges,
        "asymmetric_links": asymmetric,
        "duplicate_links": duplicates,
        "unreachable": unreachable,
        "not_in_maze": not_in_maze,
        "ok": ok,
    }


__all__ = ["analyze", "flood_reachable"]
