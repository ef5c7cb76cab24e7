"""
project: mazegame
module: server.py
License: MIT

Server bootstrap for the maze HTTP API.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from mazegame import create_app


def start_server(host="127.0.0.1", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Create the app, configure logging and serve until interrupted.

    When debug=True, Flask's debugger and reloader provide verbose tracebacks.
    """
    app = create_app()
    _configure_logging(app)
    print(f"[INFO] Starting maze API on {host}:{port}")
    app.run(host=host, port=port, debug=debug)


def _configure_logging(app):
    """Configure logging to both console and a rotating file in instance/.

    The file path will be instance/app.log. Retains a few backups to avoid growth.
    """
    log_dir = app.instance_path
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "app.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(fmt)

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(fmt)

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
