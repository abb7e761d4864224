"""Connectivity and density checks for a finished (mirrored) level.

A level is accepted when its free cells (EMPTY or CORRIDOR) cover a fraction
of the grid inside ``[min_empty_spaces, max_empty_spaces]`` and form a single
4-connected region.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Set, Tuple

from .blueprints import MOVES
from .grid import Coord2D, Grid

DEFAULT_MIN_EMPTY_SPACES = 0.05
DEFAULT_MAX_EMPTY_SPACES = 0.45

REASON_OK = "ok"
REASON_DENSITY_LOW = "density_low"
REASON_DENSITY_HIGH = "density_high"
REASON_DISCONNECTED = "disconnected"


class ValidationReport(NamedTuple):
    ok: bool
    reason: str
    free_cells: int
    reachable_cells: int
    density: float


def _scan_free(grid: Grid) -> Tuple[int, Optional[Coord2D]]:
    count = 0
    start = None
    for r, c, _kind in grid.cells():
        if grid.is_free(r, c):
            count += 1
            start = (r, c)  # any free cell seeds the flood fill; keep the last one
    return count, start


def free_cell_density(grid: Grid) -> float:
    count, _ = _scan_free(grid)
    return count / (grid.height * grid.width)


def flood_fill(grid: Grid, start: Coord2D) -> Set[Coord2D]:
    """Depth-first 4-directional fill over free cells; empty set if start is not free."""
    if not grid.is_free(*start):
        return set()
    visited = {start}
    stack = [start]
    while stack:
        r, c = stack.pop()
        for dr, dc in MOVES:
            nxt = (r + dr, c + dc)
            if nxt in visited or not grid.is_free(*nxt):
                continue
            visited.add(nxt)
            stack.append(nxt)
    return visited


def check_level(
    grid: Grid,
    max_empty_spaces: float = DEFAULT_MAX_EMPTY_SPACES,
    min_empty_spaces: float = DEFAULT_MIN_EMPTY_SPACES,
) -> ValidationReport:
    free, start = _scan_free(grid)
    density = free / (grid.height * grid.width)
    if density < min_empty_spaces or start is None:
        return ValidationReport(False, REASON_DENSITY_LOW, free, 0, density)
    if density > max_empty_spaces:
        return ValidationReport(False, REASON_DENSITY_HIGH, free, 0, density)
    reachable = len(flood_fill(grid, start))
    if reachable < free:
        return ValidationReport(False, REASON_DISCONNECTED, free, reachable, density)
    return ValidationReport(True, REASON_OK, free, reachable, density)


def validate(
    grid: Grid,
    max_empty_spaces: float = DEFAULT_MAX_EMPTY_SPACES,
    min_empty_spaces: float = DEFAULT_MIN_EMPTY_SPACES,
) -> bool:
    return check_level(grid, max_empty_spaces, min_empty_spaces).ok


__all__ = [
    "DEFAULT_MIN_EMPTY_SPACES",
    "DEFAULT_MAX_EMPTY_SPACES",
    "REASON_OK",
    "REASON_DENSITY_LOW",
    "REASON_DENSITY_HIGH",
    "REASON_DISCONNECTED",
    "ValidationReport",
    "free_cell_density",
    "flood_fill",
    "check_level",
    "validate",
]
