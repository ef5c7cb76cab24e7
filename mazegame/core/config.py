import hashlib
import os
import random
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

# Square sizes offered by the game's start menu.
PRESET_SIZES = {
    "small": 5,
    "medium": 10,
    "large": 15,
    "huge": 20,
}

SEED_MAX_INT = 9223372036854775807

_FALSY = {"0", "false", "no", "off", ""}


def coerce_seed(value) -> int:
    """Convert a user supplied seed (int or str) into a bounded 63-bit int.

    Digit strings are parsed, other strings hashed, None/blank picks a random seed.
    """
    if value is None:
        return random.randint(1, 1_000_000)
    if isinstance(value, bool):
        raise ConfigurationError("seed must be an integer or string", field="seed")
    if isinstance(value, int):
        return value % SEED_MAX_INT
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return random.randint(1, 1_000_000)
        if s.isdigit():
            return int(s) % SEED_MAX_INT
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % SEED_MAX_INT
    raise ConfigurationError("seed must be an integer or string", field="seed")


def _env_int(key: str) -> Optional[int]:
    raw = os.environ.get(key)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer", field=key, value=raw) from None


@dataclass
class MazeConfig:
    width: int = 10
    height: int = 10
    seed: Optional[int] = None
    enable_metrics: bool = True

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer", field=name, value=repr(value))
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive", field=name, value=value)
        if self.seed is not None:
            self.seed = coerce_seed(self.seed)

    @property
    def size(self):
        return (self.width, self.height)

    @classmethod
    def from_preset(cls, name: str, seed=None, **kwargs) -> "MazeConfig":
        key = (name or "").strip().lower()
        if key not in PRESET_SIZES:
            raise ConfigurationError(
                f"unknown preset '{name}' (choose from {', '.join(PRESET_SIZES)})", field="preset"
            )
        side = PRESET_SIZES[key]
        return cls(width=side, height=side, seed=seed, **kwargs)

    @classmethod
    def from_env(cls, **overrides) -> "MazeConfig":
        """Build a config from MAZE_* environment variables.

        Explicit keyword overrides that are not None win over the environment.
        A MAZE_PRESET supplies both dimensions unless MAZE_WIDTH/MAZE_HEIGHT are set.
        """
        values = {}
        preset = os.environ.get("MAZE_PRESET")
        if preset:
            base = cls.from_preset(preset)
            values["width"], values["height"] = base.width, base.height
        for key, attr in (("MAZE_WIDTH", "width"), ("MAZE_HEIGHT", "height")):
            env_val = _env_int(key)
            if env_val is not None:
                values[attr] = env_val
        raw_seed = os.environ.get("MAZE_SEED")
        if raw_seed:
            values["seed"] = coerce_seed(raw_seed)
        if "MAZE_ENABLE_GENERATION_METRICS" in os.environ:
            values["enable_metrics"] = (
                os.environ["MAZE_ENABLE_GENERATION_METRICS"].strip().lower() not in _FALSY
            )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["MazeConfig", "PRESET_SIZES", "coerce_seed"]
