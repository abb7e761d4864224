from __future__ import annotations

from typing import NamedTuple, Tuple

Vector = Tuple[int, int]

# (d_row, d_col); row 0 is the bottom of the level so UP increases the row.
UP: Vector = (1, 0)
RIGHT: Vector = (0, 1)
DOWN: Vector = (-1, 0)
LEFT: Vector = (0, -1)
MOVES: Tuple[Vector, ...] = (UP, RIGHT, DOWN, LEFT)

CORRIDOR_LENGTHS: Tuple[int, ...] = tuple(range(3, 11))


class WallBlueprint(NamedTuple):
    """Rectangular wall shape placed relative to the digger.

    ``anchor`` is the (row, col) offset from the digger position back to the
    shape's lowest row/col corner, so ``top_left = position - anchor``.
    """

    width: int
    height: int
    anchor: Vector

    def top_left(self, position: Vector) -> Vector:
        return (position[0] - self.anchor[0], position[1] - self.anchor[1])


WALL_BLUEPRINTS: Tuple[WallBlueprint, ...] = (
    # Horizontal bars
    WallBlueprint(3, 2, (0, 1)),
    WallBlueprint(5, 2, (0, 2)),
    WallBlueprint(7, 2, (0, 3)),
    # Vertical bars
    WallBlueprint(2, 3, (1, 0)),
    WallBlueprint(2, 5, (2, 0)),
    WallBlueprint(2, 7, (3, 0)),
    # Rectangles
    WallBlueprint(3, 5, (2, 1)),
    WallBlueprint(5, 3, (1, 2)),
    WallBlueprint(5, 5, (2, 2)),
)


def step(position: Vector, direction: Vector) -> Vector:
    return (position[0] + direction[0], position[1] + direction[1])


__all__ = [
    "UP",
    "RIGHT",
    "DOWN",
    "LEFT",
    "MOVES",
    "CORRIDOR_LENGTHS",
    "WallBlueprint",
    "WALL_BLUEPRINTS",
    "step",
]
