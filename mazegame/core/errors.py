"""Error taxonomy for maze construction and path queries.

Every error carries a short machine ``code`` so outer layers (HTTP API, CLI)
can report failures consistently without string matching on messages.
"""

from __future__ import annotations


class MazeError(Exception):
    code = "maze_error"

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self):
        payload = {"error": self.message, "code": self.code}
        payload.update({k: v for k, v in self.context.items() if v is not None})
        return payload


class ConfigurationError(MazeError):
    """Invalid grid dimensions or generation parameters."""

    code = "configuration"


class StateError(MazeError):
    """Generation invoked on a grid that is not in its pre-generation state."""

    code = "state"


class OutOfBoundsError(MazeError):
    code = "out_of_bounds"


class DisconnectedError(MazeError):
    """No route between two cells.

    Unreachable on a correctly generated grid; seeing it means the spanning
    tree invariant was broken.
    """

    code = "disconnected"


__all__ = [
    "MazeError",
    "ConfigurationError",
    "StateError",
    "OutOfBoundsError",
    "DisconnectedError",
]
