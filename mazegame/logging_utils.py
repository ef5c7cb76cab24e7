"""Structured event lines for the maze generator, API and CLI.

Emits one ``key=value`` line per event (or a compact JSON object when
``MAZE_LOG_JSON`` is set) with a timestamp and level, which keeps generator and
server output easy to grep without configuring the stdlib logging tree.

Events emitted by the package:
    maze_generated  debug  width, height, seed, edges, start, runtime_ms
    maze_served     info   width, height, seed (one per API response)
    maze_rejected   debug  code, error (4xx API responses)
    maze_error      error  code, error (5xx API responses)
    cli_generate    debug  width, height, seed
    listen          info   host, port, debug (CLI server mode)

Level threshold comes from ``MAZE_LOG_LEVEL`` (debug/info/warn/error) and is
re-read on every call so tests can flip it with monkeypatch. Reserved keys:
level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")


def _current_level() -> int:
    return LEVELS.get(os.getenv("MAZE_LOG_LEVEL", "info").lower(), 20)


def _json_mode() -> bool:
    return os.getenv("MAZE_LOG_JSON", "0") in _TRUTHY


def _kv_value(v) -> str:
    # key=value lines split on spaces, so text values carry underscores instead
    if isinstance(v, (int, float)):
        return str(v)
    return str(v).replace(" ", "_")


def _format(level: str, **fields):
    if _json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        try:
            return json.dumps(rec, separators=(",", ":"), default=str)
        except (TypeError, ValueError):
            return json.dumps({"level": level, "ts": int(time.time()), "error": "json_encode_failed"})
    parts = [f"level={level}", f"ts={int(time.time())}"]
    parts.extend(f"{k}={_kv_value(v)}" for k, v in fields.items() if v is not None)
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazegame"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < _current_level():
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stdout if lvl != "error" else sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazegame")
