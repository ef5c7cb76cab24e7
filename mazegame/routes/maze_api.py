"""
project: mazegame
module: maze_api.py
License: MIT

Maze generation and path query routes.

The rendering client asks for a maze by size and seed, draws walls from the
returned passage flags, and asks for paths when it needs hint breadcrumbs.
Every response for the same (seed, width, height) describes the same maze.
"""

import threading

from flask import Blueprint, Response, current_app, jsonify, request

from mazegame.core import (
    ConfigurationError,
    DisconnectedError,
    MazeConfig,
    MazeError,
    OutOfBoundsError,
    StateError,
    build_maze,
    coerce_seed,
    find_path,
    grid_to_dict,
    path_coords,
    render_ascii,
)
from mazegame.logging_utils import get_logger

log = get_logger("mazegame.api")

bp_maze = Blueprint("maze", __name__)

_STATUS_BY_ERROR = {
    ConfigurationError: 400,
    OutOfBoundsError: 400,
    StateError: 409,
    DisconnectedError: 500,
}

# Simple in-process cache (seed,width,height)->(Grid, metrics). Grids are only
# read after generation, so sharing them across request threads is safe.
_maze_cache = {}
_maze_cache_lock = threading.Lock()


def get_cached_maze(seed: int, width: int, height: int):
    cfg = current_app.config
    config = MazeConfig(
        width=width,
        height=height,
        seed=seed,
        enable_metrics=cfg.get("MAZE_ENABLE_GENERATION_METRICS", True),
    )
    if cfg.get("MAZE_DISABLE_CACHE"):
        grid, gen = build_maze(config)
        return grid, gen.metrics
    key = (seed, width, height)
    with _maze_cache_lock:
        hit = _maze_cache.get(key)
    if hit is not None:
        return hit
    grid, gen = build_maze(config)
    entry = (grid, gen.metrics)
    with _maze_cache_lock:
        _maze_cache[key] = entry
        cap = max(1, int(cfg.get("MAZE_CACHE_MAX", 8)))
        while len(_maze_cache) > cap:
            first_key = next(iter(_maze_cache))
            if first_key == key:
                break
            _maze_cache.pop(first_key, None)
    return entry


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer", field=name, value=raw) from None


def _request_config() -> MazeConfig:
    cfg = current_app.config
    preset = request.args.get("preset")
    if preset:
        base = MazeConfig.from_preset(preset)
        width, height = base.width, base.height
    else:
        width = _int_arg("width", cfg["MAZE_DEFAULT_WIDTH"])
        height = _int_arg("height", cfg["MAZE_DEFAULT_HEIGHT"])
    limit = cfg["MAZE_MAX_SIZE"]
    if width > limit or height > limit:
        raise ConfigurationError(f"maze sides are limited to {limit}", field="size", limit=limit)
    return MazeConfig(width=width, height=height, seed=coerce_seed(request.args.get("seed")))


def _coord_arg(name: str, default):
    raw = request.args.get(name)
    if raw is None or raw.strip() == "":
        return default
    parts = raw.split(",")
    try:
        if len(parts) != 2:
            raise ValueError(raw)
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise OutOfBoundsError(f"{name} must look like x,y", field=name, value=raw) from None


def _endpoints(config: MazeConfig):
    start = _coord_arg("start", (0, 0))
    end = _coord_arg("end", (config.width - 1, config.height - 1))
    return start, end


@bp_maze.errorhandler(MazeError)
def _maze_error(err: MazeError):
    status = _STATUS_BY_ERROR.get(type(err), 400)
    if status >= 500:
        log.error(event="maze_error", code=err.code, error=err.message)
    else:
        log.debug(event="maze_rejected", code=err.code, error=err.message)
    return jsonify(err.to_dict()), status


@bp_maze.route("/api/maze")
def maze():
    """Return the passage layout of a maze.

    Query: width, height (or preset), seed.
    Response: { 'seed', 'width', 'height', 'cells': [{x, y, n, e, s, w}], 'metrics' }
    """
    config = _request_config()
    grid, metrics = get_cached_maze(config.seed, config.width, config.height)
    payload = grid_to_dict(grid)
    payload["seed"] = config.seed
    payload["metrics"] = metrics
    log.info(event="maze_served", width=grid.width, height=grid.height, seed=config.seed)
    return jsonify(payload)


@bp_maze.route("/api/maze/path")
def maze_path():
    """Return the unique path between two cells.

    Query: maze params plus start=x,y and end=x,y (default: top-left to bottom-right).
    Response: { 'seed', 'path': [[x, y], ...], 'length' }
    """
    config = _request_config()
    grid, _metrics = get_cached_maze(config.seed, config.width, config.height)
    start, end = _endpoints(config)
    path = find_path(grid, start, end)
    return jsonify(
        {
            "seed": config.seed,
            "path": [list(c) for c in path_coords(path)],
            "length": len(path) - 1,
        }
    )


@bp_maze.route("/api/maze/render")
def maze_render():
    """Plain-text rendering; pass start/end to overlay their path."""
    config = _request_config()
    grid, _metrics = get_cached_maze(config.seed, config.width, config.height)
    path = None
    if request.args.get("start") or request.args.get("end"):
        start, end = _endpoints(config)
        path = find_path(grid, start, end)
    text = render_ascii(grid, path=path)
    return Response(text + "\n", mimetype="text/plain", headers={"X-Maze-Seed": str(config.seed)})
