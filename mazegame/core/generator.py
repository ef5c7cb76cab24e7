"""Perfect-maze generation by randomized frontier growth (Prim variant).

Phases:
    * Pick a uniformly random start cell and mark it in-maze.
    * Seed the frontier with the start cell's in-bounds neighbours.
    * Repeatedly draw a random frontier cell, link it to a random in-maze
      neighbour, mark it in-maze and push its fresh neighbours.

Each join adds exactly one cell and one edge, so when the frontier drains the
grid holds a spanning tree of ``width * height - 1`` edges.

The joining neighbour is drawn from *all* in-maze neighbours of the frontier
cell, not only the one that first exposed it. That produces more branching than
textbook frontier growth and is part of the maze's expected character.

The whole run is determined by the random source's draw sequence: the frontier
is kept in an ordered list (never a hash set) so a fixed seed always yields the
same maze for the same dimensions.
"""

from __future__ import annotations

import random
import time
from typing import Any, Dict, List, Optional

from ..logging_utils import get_logger
from .cells import Cell, Direction
from .errors import StateError
from .grid import Grid
from .metrics import init_metrics

log = get_logger("mazegame.generator")


class _Frontier:
    """Ordered set of cells with O(1) add, membership and random removal."""

    __slots__ = ("_items", "_pos")

    def __init__(self):
        self._items: List[Cell] = []
        self._pos: Dict[int, int] = {}

    def __len__(self):
        return len(self._items)

    def __contains__(self, cell: Cell):
        return id(cell) in self._pos

    def add(self, cell: Cell) -> bool:
        if id(cell) in self._pos:
            return False
        self._pos[id(cell)] = len(self._items)
        self._items.append(cell)
        return True

    def pick(self, rng) -> Cell:
        return self._items[rng.randrange(len(self._items))]

    def remove(self, cell: Cell) -> None:
        i = self._pos.pop(id(cell))
        last = self._items.pop()
        if last is not cell:
            self._items[i] = last
            self._pos[id(last)] = i


class MazeGenerator:
    def __init__(
        self,
        grid: Grid,
        rng: Optional[Any] = None,
        *,
        seed: Optional[int] = None,
        enable_metrics: bool = True,
    ):
        self.grid = grid
        if rng is None:
            # Preserve seed semantics: 0 is a valid seed, None picks one we can report
            if seed is None:
                seed = random.randint(1, 1_000_000)
            rng = random.Random(seed)
        self.seed = seed
        self._rng = rng
        self.enable_metrics = enable_metrics
        self.metrics: Dict[str, Any] = init_metrics() if enable_metrics else {}
        self._frontier = _Frontier()
        self._ran = False

    def run(self) -> Grid:
        if self._ran:
            raise StateError("this generator has already run; allocate a new grid and generator")
        if not self.grid.is_pristine:
            raise StateError(
                "grid already contains maze cells or passages",
                width=self.grid.width,
                height=self.grid.height,
            )
        self._ran = True
        start_ts = time.perf_counter()
        grid, rng = self.grid, self._rng

        start = grid.cell_at(rng.randrange(grid.width), rng.randrange(grid.height))
        start.in_maze = True
        self._push_neighbours(start)

        while self._frontier:
            cell = self._frontier.pick(rng)
            candidates = self._maze_neighbours(cell)
            # Frontier cells are only ever added next to an in-maze cell
            target = candidates[rng.randrange(len(candidates))]
            grid.connect(cell, target)
            cell.in_maze = True
            self._frontier.remove(cell)
            self._push_neighbours(cell)
            if self.enable_metrics:
                self.metrics['draws'] += 1
                if len(candidates) > 1:
                    self.metrics['multi_choice_joins'] += 1

        runtime_ms = int((time.perf_counter() - start_ts) * 1000)
        if self.enable_metrics:
            self.metrics['cells'] = len(grid)
            self.metrics['edges'] = grid.edge_count()
            self.metrics['runtime_ms'] = runtime_ms
        log.debug(
            event="maze_generated",
            width=grid.width,
            height=grid.height,
            seed=self.seed,
            edges=grid.edge_count(),
            start=f"{start.x},{start.y}",
            runtime_ms=runtime_ms,
        )
        return grid

    def _maze_neighbours(self, cell: Cell) -> List[Cell]:
        out = []
        for d in Direction:
            other = self.grid.adjacent(cell, d)
            if other is not None and other.in_maze:
                out.append(other)
        return out

    def _push_neighbours(self, cell: Cell) -> None:
        for d in Direction:
            other = self.grid.adjacent(cell, d)
            if other is not None and not other.in_maze:
                self._frontier.add(other)
        if self.enable_metrics and len(self._frontier) > self.metrics['frontier_peak']:
            self.metrics['frontier_peak'] = len(self._frontier)


def generate_maze(grid: Grid, rng=None, seed: Optional[int] = None, enable_metrics: bool = True) -> MazeGenerator:
    """Carve a perfect maze into ``grid`` in place.

    Pass either a ``random.Random``-like ``rng`` or a ``seed``; with neither a
    seed is drawn and exposed as ``generator.seed``. Returns the generator so
    callers can read ``seed`` and ``metrics``. Raises StateError if ``grid``
    was already generated.
    """
    gen = MazeGenerator(grid, rng, seed=seed, enable_metrics=enable_metrics)
    gen.run()
    return gen


__all__ = ["MazeGenerator", "generate_maze"]
