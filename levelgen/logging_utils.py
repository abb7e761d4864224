"""Structured event logging for level generation.

Each call writes one line: ``level=<lvl> ts=<epoch> event=... key=value ...``
or, with ``LEVELGEN_LOG_JSON`` set, a compact JSON object. Fields set to None
are left out. ``error`` lines go to stderr, everything else to stdout.

    LEVELGEN_LOG_LEVEL   debug | info | warn | error (default info)
    LEVELGEN_LOG_JSON    1/true/yes/on
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("LEVELGEN_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("LEVELGEN_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _json_line(level: str, ts: int, fields: dict) -> str:
    rec = {k: v for k, v in fields.items() if v is not None}
    rec.update(level=level, ts=ts)
    try:
        return json.dumps(rec, separators=(",", ":"))
    except (TypeError, ValueError):
        # Unserialisable field (a Grid, say); keep the event name at least.
        return json.dumps({"level": level, "ts": ts, "event": str(fields.get("event")), "error": "json_encode_failed"})


def _kv_line(level: str, ts: int, fields: dict) -> str:
    parts = [f"level={level}", f"ts={ts}"]
    for k, v in fields.items():
        if v is None:
            continue
        text = v if isinstance(v, (int, float)) else str(v).replace(" ", "_")
        parts.append(f"{k}={text}")
    return " ".join(parts)


def _format(level: str, **fields) -> str:
    render = _json_line if JSON_MODE else _kv_line
    return render(level, int(time.time()), fields)


class _Logger:
    def __init__(self, name: str):
        self.name = name

    def is_enabled(self, lvl: str) -> bool:
        return LEVELS[lvl] >= CURRENT_LEVEL

    def _emit(self, lvl: str, fields: dict) -> None:
        if not self.is_enabled(lvl):
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if lvl == "error" else sys.stdout
        print(_format(lvl, **fields), file=stream)

    def debug(self, **fields):
        self._emit("debug", fields)

    def info(self, **fields):
        self._emit("info", fields)

    def warn(self, **fields):
        self._emit("warn", fields)

    def error(self, **fields):
        self._emit("error", fields)


_LOGGERS: dict = {}


def get_logger(name: str) -> _Logger:
    """Return the shared logger for ``name`` (one instance per name)."""
    if name not in _LOGGERS:
        _LOGGERS[name] = _Logger(name)
    return _LOGGERS[name]
