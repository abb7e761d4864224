"""Directional tile variants for drawing solid cells.

A renderer picks an edge/corner sprite for every WALL and BORDER cell based on
which orthogonal neighbours are also solid. This is a derived view of a
finished grid and plays no part in generation or validation.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Optional, Sequence

from .blueprints import DOWN, LEFT, RIGHT, UP, Vector, step
from .grid import Coord2D, Grid
from .tiles import BORDER, WALL


class Variant(IntEnum):
    TOP_LEFT = 0
    TOP = 1
    TOP_RIGHT = 2
    RIGHT = 3
    BOTTOM_RIGHT = 4
    BOTTOM = 5
    BOTTOM_LEFT = 6
    LEFT = 7
    MIDDLE = 8


# First match wins; order matters because later patterns are subsets of earlier ones.
_WALL_RULES = (
    ((UP, RIGHT, DOWN, LEFT), Variant.MIDDLE),
    ((RIGHT, DOWN, LEFT), Variant.TOP),
    ((UP, DOWN, LEFT), Variant.RIGHT),
    ((UP, RIGHT, LEFT), Variant.BOTTOM),
    ((UP, RIGHT, DOWN), Variant.LEFT),
    ((RIGHT, DOWN), Variant.TOP_LEFT),
    ((LEFT, DOWN), Variant.TOP_RIGHT),
    ((UP, LEFT), Variant.BOTTOM_RIGHT),
    ((RIGHT, UP), Variant.BOTTOM_LEFT),
)


def _occupied(grid: Grid, pos: Coord2D, directions: Sequence[Vector]) -> bool:
    """True when every neighbour in ``directions`` is solid or off the grid."""
    return all(not grid.is_free(*step(pos, d)) for d in directions)


def wall_variant(grid: Grid, row: int, col: int) -> Optional[Variant]:
    if grid.get(row, col) != WALL:
        return None
    for directions, variant in _WALL_RULES:
        if _occupied(grid, (row, col), directions):
            return variant
    return None


def border_variant(grid: Grid, row: int, col: int) -> Optional[Variant]:
    if grid.get(row, col) != BORDER:
        return None
    top, right = grid.height - 1, grid.width - 1
    corners = {
        (0, 0): Variant.BOTTOM_LEFT,
        (0, right): Variant.BOTTOM_RIGHT,
        (top, right): Variant.TOP_RIGHT,
        (top, 0): Variant.TOP_LEFT,
    }
    if (row, col) in corners:
        return corners[(row, col)]
    if col == 0:
        return Variant.LEFT
    if col == right:
        return Variant.RIGHT
    if row == 0:
        return Variant.BOTTOM
    if row == top:
        return Variant.TOP
    return None


def variant_map(grid: Grid) -> Dict[Coord2D, Variant]:
    """Variant for every solid cell that has one; unrecognised shapes are left out.

    Walls on the outer ring are skipped, only interior walls are classified.
    """
    out: Dict[Coord2D, Variant] = {}
    for r, c, kind in grid.cells():
        if kind == BORDER:
            v = border_variant(grid, r, c)
        elif kind == WALL and 0 < r < grid.height - 1 and 0 < c < grid.width - 1:
            v = wall_variant(grid, r, c)
        else:
            continue
        if v is not None:
            out[(r, c)] = v
    return out


__all__ = ["Variant", "wall_variant", "border_variant", "variant_map"]
