"""Exception types raised by the level generator."""

from __future__ import annotations

from typing import Any, Dict, Optional


class LevelGenError(Exception):
    """Base class for level generation errors."""


class ConfigError(LevelGenError, ValueError):
    """Raised when a LevelConfig cannot produce a level (checked before generation)."""


class GenerationExhausted(LevelGenError, RuntimeError):
    """Raised when ``max_attempts`` attempts were all rejected by validation."""

    def __init__(self, attempts: int, metrics: Optional[Dict[str, Any]] = None):
        super().__init__(f"no valid level after {attempts} attempts")
        self.attempts = attempts
        self.metrics = metrics or {}


__all__ = ["LevelGenError", "ConfigError", "GenerationExhausted"]
