"""
project: mazegame
module: __init__.py
License: MIT

Flask application factory for the maze HTTP API.

The maze core itself lives in ``mazegame.core`` and has no web dependencies;
this module only wires that core into a Flask app for the rendering client.
Configuration is sourced from environment variables (optionally via a ``.env``
file) with defaults suitable for local development. A local ``instance/``
directory holds the server log.
"""

import os

from dotenv import load_dotenv
from flask import Flask

from mazegame.trail import PlayerTrail


def create_app(test_config: dict | None = None) -> Flask:
    # Load .env if present so MAZE_* settings can be supplied without exporting
    load_dotenv()

    from mazegame.core.config import MazeConfig

    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        # Read-only checkouts still serve mazes; only the log file is lost
        pass

    defaults = MazeConfig.from_env()
    app.config.update(
        MAZE_DEFAULT_WIDTH=defaults.width,
        MAZE_DEFAULT_HEIGHT=defaults.height,
        MAZE_MAX_SIZE=int(os.getenv("MAZE_MAX_SIZE", "200")),
        MAZE_CACHE_MAX=int(os.getenv("MAZE_CACHE_MAX", "8")),
        MAZE_DISABLE_CACHE=os.getenv("MAZE_DISABLE_CACHE", "0") == "1",
        MAZE_ENABLE_GENERATION_METRICS=defaults.enable_metrics,
    )
    if test_config:
        app.config.update(test_config)

    from mazegame.routes.maze_api import bp_maze

    app.register_blueprint(bp_maze)
    return app


__all__ = ["create_app", "PlayerTrail"]
