"""Generation loop: reset, border, dig, mirror, validate, retry.

Every attempt starts from a blank half-grid and draws fresh randomness from
the same ``random.Random`` so a seed reproduces the whole sequence of
rejected attempts as well as the accepted level. Retries are unbounded unless
``LevelConfig.max_attempts`` is set, in which case GenerationExhausted is
raised once the cap is hit.
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional

from ..logging_utils import get_logger
from .builder import build
from .config import LevelConfig
from .digger import Digger
from .errors import GenerationExhausted
from .grid import Coord2D, Grid
from .metrics import init_metrics, tile_counts
from .mirror import mirror
from .tiles import BORDER, EMPTY
from .validator import REASON_OK, ValidationReport, check_level
from .variants import Variant, variant_map

_log = get_logger("levelgen.level")

_REJECTION_KEYS = {
    "density_low": "rejected_density_low",
    "density_high": "rejected_density_high",
    "disconnected": "rejected_disconnected",
}


@dataclass(frozen=True)
class Level:
    """Accepted level handed to the host (renderer, game state, ...)."""

    grid: Grid
    seed: Optional[int]
    attempts: int
    config: LevelConfig
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def width(self) -> int:
        return self.grid.width

    def is_walkable(self, row: int, col: int) -> bool:
        # Leftover EMPTY cells count as floor, same as CORRIDOR.
        return self.grid.is_free(row, col)

    def variants(self) -> Dict[Coord2D, Variant]:
        return variant_map(self.grid)


class LevelGenerator:
    def __init__(self, config: LevelConfig | None = None, rng: random.Random | None = None):
        # The caller's config is never mutated; a drawn seed lives on this copy.
        self.config = replace(config or LevelConfig()).validate()
        if rng is None:
            if self.config.seed is None:
                self.config.seed = random.randint(0, 2**31 - 1)
            rng = random.Random(self.config.seed)
        self.seed = self.config.seed
        self.rng = rng
        self._reset_run()

    def _reset_run(self) -> None:
        self.attempts = 0
        self.metrics: Dict[str, Any] = init_metrics() if self.config.enable_metrics else {}
        self._phase_times: Dict[str, int] = {}

    def _phase(self, label: str, fn: Callable, *a, **k):
        if not self.config.enable_metrics:
            return fn(*a, **k)
        ps = time.perf_counter()
        r = fn(*a, **k)
        pe = time.perf_counter()
        self._phase_times[label] = self._phase_times.get(label, 0) + int((pe - ps) * 1000)
        return r

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def reset(self) -> Grid:
        return Grid(self.config.half_height, self.config.half_width, fill=EMPTY)

    def build_boundary(self, half: Grid) -> None:
        h, w = half.size
        # Outer row and column of the quadrant become the level's outer ring once mirrored.
        build(half, w, 1, (h - 1, 0), BORDER)
        build(half, 1, h, (0, w - 1), BORDER)

    def dig(self, half: Grid) -> Digger:
        digger = Digger(half, self.rng, position=(0, 0))
        digger.run()
        return digger

    def attempt(self) -> tuple[Grid, ValidationReport, Digger]:
        """Run one full attempt; returns the mirrored grid, its report and the digger."""
        half = self._phase("reset", self.reset)
        self._phase("build_boundary", self.build_boundary, half)
        digger = self._phase("dig", self.dig, half)
        full = self._phase("mirror", mirror, half)
        report = self._phase(
            "validate",
            check_level,
            full,
            self.config.max_empty_spaces,
            self.config.min_empty_spaces,
        )
        return full, report, digger

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def generate(self) -> Level:
        """Retry attempts until one validates.

        Each call starts a fresh run with its own attempt budget and metrics.
        The RNG is not reseeded, so a later call continues the random stream
        and its level cannot be replayed from the recorded seed alone.
        """
        self._reset_run()
        start = time.perf_counter()
        cap = self.config.max_attempts
        while cap is None or self.attempts < cap:
            self.attempts += 1
            full, report, digger = self.attempt()
            if report.reason == REASON_OK:
                self._record_success(full, report, digger, start)
                _log.info(
                    event="level_generated",
                    seed=self.seed,
                    attempts=self.attempts,
                    density=round(report.density, 4),
                    runtime_ms=self.metrics.get("runtime_ms"),
                )
                return Level(full, self.seed, self.attempts, self.config, dict(self.metrics))
            if self.config.enable_metrics:
                self.metrics[_REJECTION_KEYS[report.reason]] += 1
            _log.debug(
                event="level_attempt_rejected",
                attempt=self.attempts,
                reason=report.reason,
                density=round(report.density, 4),
                free=report.free_cells,
                reachable=report.reachable_cells,
            )
        self._finish_metrics(start)
        _log.error(event="level_generation_exhausted", seed=self.seed, attempts=self.attempts)
        raise GenerationExhausted(self.attempts, dict(self.metrics))

    def _finish_metrics(self, start: float) -> None:
        self.metrics["seed"] = self.seed
        self.metrics["attempts"] = self.attempts
        if self.config.enable_metrics:
            self.metrics["runtime_ms"] = int((time.perf_counter() - start) * 1000)
            self.metrics["phase_ms"] = dict(self._phase_times)

    def _record_success(self, full: Grid, report: ValidationReport, digger: Digger, start: float) -> None:
        self._finish_metrics(start)
        if not self.config.enable_metrics:
            return
        self.metrics["walls_built"] = digger.builds
        self.metrics["corridors_dug"] = digger.digs
        self.metrics["digger_passes"] = digger.steps
        self.metrics["free_cells"] = report.free_cells
        self.metrics["density"] = report.density
        self.metrics.update(tile_counts(full))


def generate_level(
    config: LevelConfig | None = None,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> Level:
    """Generate one validated level; ``seed`` overrides ``config.seed``."""
    config = config or LevelConfig()
    if seed is not None:
        config = replace(config, seed=seed)
    return LevelGenerator(config, rng=rng).generate()


__all__ = ["Level", "LevelGenerator", "generate_level"]
