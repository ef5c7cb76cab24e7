"""Public maze core interface.

Grid construction, perfect-maze generation and path queries, plus the error
taxonomy and helper views consumed by the rendering and scoring layers.
"""

from .cells import Cell, Coord2D, Direction  # noqa: F401
from .config import PRESET_SIZES, MazeConfig, coerce_seed  # noqa: F401
from .diagnostics import analyze  # noqa: F401
from .errors import (  # noqa: F401
    ConfigurationError,
    DisconnectedError,
    MazeError,
    OutOfBoundsError,
    StateError,
)
from .generator import MazeGenerator, generate_maze  # noqa: F401
from .grid import Grid, new_grid  # noqa: F401
from .pathfinder import distance, find_path, path_coords, path_directions  # noqa: F401
from .render import grid_to_dict, render_ascii, render_coordinates  # noqa: F401


def build_maze(config: MazeConfig | None = None, *, rng=None, **kwargs) -> tuple[Grid, MazeGenerator]:
    """Allocate and generate a grid in one call.

    Accepts a MazeConfig or the same keyword fields (width, height, seed,
    enable_metrics).
    """
    if config is None:
        config = MazeConfig(**kwargs)
    grid = new_grid(config.width, config.height)
    gen = generate_maze(grid, rng=rng, seed=config.seed, enable_metrics=config.enable_metrics)
    return grid, gen


__all__ = [
    "Cell",
    "Coord2D",
    "Direction",
    "Grid",
    "MazeConfig",
    "MazeGenerator",
    "PRESET_SIZES",
    "ConfigurationError",
    "DisconnectedError",
    "MazeError",
    "OutOfBoundsError",
    "StateError",
    "analyze",
    "build_maze",
    "coerce_seed",
    "distance",
    "find_path",
    "generate_maze",
    "grid_to_dict",
    "new_grid",
    "path_coords",
    "path_directions",
    "render_ascii",
    "render_coordinates",
]
