"""Rectangle placement on a grid.

Both helpers clip to the grid: cells outside the bounds are skipped, so a
blueprint may hang over the edge without blocking placement.
"""

from __future__ import annotations

from typing import Iterator

from .blueprints import Vector
from .grid import Coord2D, Grid
from .tiles import SOLID_TILES


def _rect_cells(grid: Grid, width: int, height: int, top_left: Vector) -> Iterator[Coord2D]:
    r0, c0 = top_left
    for r in range(r0, r0 + height):
        if r < 0 or r >= grid.height:
            continue
        for c in range(c0, c0 + width):
            if c < 0 or c >= grid.width:
                continue
            yield r, c


def build(grid: Grid, width: int, height: int, top_left: Vector, kind: str) -> int:
    """Fill the in-bounds part of the rectangle with ``kind``; returns cells written."""
    written = 0
    for r, c in _rect_cells(grid, width, height, top_left):
        grid.set(r, c, kind)
        written += 1
    return written


def can_build(grid: Grid, width: int, height: int, top_left: Vector) -> bool:
    """True when no in-bounds cell of the rectangle is a wall or border.

    Corridor cells do not block: a new wall may cover an older corridor, and
    the validator rejects the level if that cuts the free space apart.
    """
    for r, c in _rect_cells(grid, width, height, top_left):
        if grid.get(r, c) in SOLID_TILES:
            return False
    return True


__all__ = ["build", "can_build"]
