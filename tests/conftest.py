import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegame import create_app  # noqa: E402
from mazegame.routes import maze_api  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_maze_env(monkeypatch):
    # A developer's shell or .env must not leak default sizes/seeds into tests
    for key in (
        "MAZE_WIDTH",
        "MAZE_HEIGHT",
        "MAZE_PRESET",
        "MAZE_SEED",
        "MAZE_ENABLE_GENERATION_METRICS",
        "MAZE_LOG_LEVEL",
        "MAZE_LOG_JSON",
        "MAZE_MAX_SIZE",
        "MAZE_CACHE_MAX",
        "MAZE_DISABLE_CACHE",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def test_app(tmp_path):
    app = create_app({"TESTING": True, "MAZE_MAX_SIZE": 60})
    app.instance_path = str(tmp_path)
    with maze_api._maze_cache_lock:
        maze_api._maze_cache.clear()
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()
