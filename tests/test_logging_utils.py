import json
import logging

from mazegame import logging_utils
from mazegame.core import generate_maze, new_grid
from mazegame.server import _configure_logging


def test_key_value_format(capsys):
    logging_utils.get_logger("t").info(event="maze served", width=4, seed=None)
    line = capsys.readouterr().out.strip()
    assert line.startswith("level=info ts=")
    assert "event=maze_served" in line
    assert "width=4" in line
    assert "seed=" not in line
    assert "logger=t" in line


def test_json_mode(monkeypatch, capsys):
    monkeypatch.setenv("MAZE_LOG_JSON", "1")
    logging_utils.get_logger("t").warn(event="x", size=3)
    rec = json.loads(capsys.readouterr().out)
    assert rec["level"] == "warn" and rec["size"] == 3 and rec["logger"] == "t"


def test_level_threshold_and_stderr(monkeypatch, capsys):
    monkeypatch.setenv("MAZE_LOG_LEVEL", "warn")
    log = logging_utils.get_logger("t")
    log.info(event="hidden")
    log.error(event="shown")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "event=shown" in captured.err


def test_logger_cache():
    assert logging_utils.get_logger("same") is logging_utils.get_logger("same")


def test_generator_debug_event(monkeypatch, capsys):
    monkeypatch.setenv("MAZE_LOG_LEVEL", "debug")
    generate_maze(new_grid(3, 3), seed=42)
    out = capsys.readouterr().out
    assert "event=maze_generated" in out
    assert "seed=42" in out
    assert "edges=8" in out
    assert "logger=mazegame.generator" in out


def test_configure_logging_idempotent(test_app):
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        # Run logging config twice to ensure idempotence (handler replace path)
        _configure_logging(test_app)
        path = _configure_logging(test_app)
        assert len(root.handlers) == 2
        logging.getLogger("mazegame.test").info("hello")
        for h in root.handlers:
            h.flush()
        with open(path, encoding="utf-8") as f:
            assert "hello" in f.read()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
