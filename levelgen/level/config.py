import os
from dataclasses import dataclass, fields
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from ..logging_utils import get_logger
from .errors import ConfigError

_log = get_logger("levelgen.level.config")

# Editor slider range of the ceiling; lower values are allowed but almost never validate.
TUNED_MAX_EMPTY_RANGE = (0.4, 1.0)
MIN_HALF_SIZE = 2

_ENV_MAP = {
    "LEVELGEN_HALF_HEIGHT": ("half_height", int),
    "LEVELGEN_HALF_WIDTH": ("half_width", int),
    "LEVELGEN_MAX_EMPTY_SPACES": ("max_empty_spaces", float),
    "LEVELGEN_MIN_EMPTY_SPACES": ("min_empty_spaces", float),
    "LEVELGEN_SEED": ("seed", int),
    "LEVELGEN_MAX_ATTEMPTS": ("max_attempts", int),
    "LEVELGEN_ENABLE_METRICS": ("enable_metrics", bool),
}


@dataclass
class LevelConfig:
    half_height: int = 15
    half_width: int = 14
    max_empty_spaces: float = 0.45
    min_empty_spaces: float = 0.05
    seed: Optional[int] = None
    max_attempts: Optional[int] = None  # None retries until a level validates
    enable_metrics: bool = True

    @property
    def full_height(self) -> int:
        return self.half_height * 2

    @property
    def full_width(self) -> int:
        return self.half_width * 2

    def validate(self) -> "LevelConfig":
        """Raise ConfigError for values that would break generation; returns self."""
        for name in ("half_height", "half_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an int, got {value!r}")
            if value < MIN_HALF_SIZE:
                raise ConfigError(f"{name} must be >= {MIN_HALF_SIZE}, got {value}")
        for name in ("max_empty_spaces", "min_empty_spaces"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")
        if self.max_attempts is not None and (
            isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int)
        ):
            raise ConfigError(f"max_attempts must be an int or None, got {self.max_attempts!r}")
        if not 0.0 <= self.min_empty_spaces <= 1.0:
            raise ConfigError(f"min_empty_spaces must be within [0, 1], got {self.min_empty_spaces}")
        if not self.min_empty_spaces <= self.max_empty_spaces <= 1.0:
            raise ConfigError(
                f"max_empty_spaces must be within [{self.min_empty_spaces}, 1], got {self.max_empty_spaces}"
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ConfigError(f"max_attempts must be >= 1 or None, got {self.max_attempts}")
        if self.max_empty_spaces < TUNED_MAX_EMPTY_RANGE[0]:
            _log.warn(
                event="config_low_density_ceiling",
                max_empty_spaces=self.max_empty_spaces,
                tuned_min=TUNED_MAX_EMPTY_RANGE[0],
            )
        return self

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides) -> "LevelConfig":
        """Build a config from LEVELGEN_* variables; keyword overrides win.

        A .env file (``dotenv_path`` or the nearest one above the working
        directory) is loaded first; variables already set in the process win.
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        values = {}
        for env_key, (attr, kind) in _ENV_MAP.items():
            if env_key not in os.environ:
                continue
            raw = os.environ.get(env_key, "").strip()
            if kind is bool:
                values[attr] = raw.lower() not in {"0", "false", "no", ""}
                continue
            if raw.lower() in {"", "none"} and attr in ("seed", "max_attempts"):
                values[attr] = None
                continue
            try:
                values[attr] = kind(raw)
            except ValueError as exc:
                raise ConfigError(f"{env_key}={raw!r} is not a valid {kind.__name__}") from exc
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"unknown config fields: {sorted(unknown)}")
        values.update(overrides)
        return cls(**values)


__all__ = ["LevelConfig", "TUNED_MAX_EMPTY_RANGE"]
