"""Random-walk digger that alternates wall placement and corridor carving.

Each pass tries to drop one wall blueprint over the current position and then
to carve one straight corridor away from it. The walk ends on the first pass
where neither action succeeds.

Corridor rules (checked step by step from the current position):
    * never leave the grid or step onto a BORDER cell;
    * never step from outside a wall into a WALL (a corridor may start inside
      a wall and tunnel out of it, but not back in);
    * never step from outside a corridor into a CORRIDOR, so corridors only
      touch older corridors at their own start;
    * the landing cell must still be EMPTY.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from .blueprints import CORRIDOR_LENGTHS, MOVES, WALL_BLUEPRINTS, Vector, WallBlueprint
from .blueprints import step as move
from .builder import build, can_build
from .grid import Grid
from .tiles import BORDER, CORRIDOR, EMPTY, WALL


class Digger:
    def __init__(
        self,
        grid: Grid,
        rng: random.Random,
        position: Vector = (0, 0),
        blueprints: Sequence[WallBlueprint] = WALL_BLUEPRINTS,
    ):
        self.grid = grid
        self.rng = rng
        self.position = position
        self.blueprints = tuple(blueprints)
        self.builds = 0
        self.digs = 0
        self.steps = 0

    # ------------------------------------------------------------------
    # Walls
    # ------------------------------------------------------------------
    def try_build(self) -> bool:
        """Place the first blueprint (in shuffled order) that fits; True if one was built."""
        order = list(range(len(self.blueprints)))
        self.rng.shuffle(order)
        for idx in order:
            bp = self.blueprints[idx]
            top_left = bp.top_left(self.position)
            if can_build(self.grid, bp.width, bp.height, top_left):
                build(self.grid, bp.width, bp.height, top_left, WALL)
                self.builds += 1
                return True
        return False

    # ------------------------------------------------------------------
    # Corridors
    # ------------------------------------------------------------------
    def try_dig(self) -> bool:
        directions = list(MOVES)
        self.rng.shuffle(directions)
        lengths = list(CORRIDOR_LENGTHS)
        self.rng.shuffle(lengths)
        for direction in directions:
            for length in lengths:
                if self.can_dig_corridor(self.position, direction, length):
                    self.dig_corridor(direction, length)
                    return True
        return False

    def can_dig_corridor(self, position: Vector, direction: Vector, length: int) -> bool:
        grid = self.grid
        current = position
        for _ in range(length):
            nxt = move(current, direction)
            if not grid.in_bounds(*nxt):
                return False
            here = grid.get(*current)
            there = grid.get(*nxt)
            if here != WALL and there == WALL:
                return False
            if here != CORRIDOR and there == CORRIDOR:
                return False
            if there == BORDER:
                return False
            current = nxt
        return grid.get(*current) == EMPTY

    def dig_corridor(self, direction: Vector, length: int) -> None:
        """Carve the path; the landing cell stays EMPTY and becomes the new position."""
        current = self.position
        for _ in range(length):
            if self.grid.get(*current) == EMPTY:
                self.grid.set(current[0], current[1], CORRIDOR)
            current = move(current, direction)
        self.position = current
        self.digs += 1

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------
    def step(self) -> bool:
        built = self.try_build()
        dug = self.try_dig()
        self.steps += 1
        return built or dug

    def run(self, max_steps: Optional[int] = None) -> int:
        """Walk until stuck (or ``max_steps`` passes); returns passes taken."""
        passes = 0
        while max_steps is None or passes < max_steps:
            passes += 1
            if not self.step():
                break
        return passes


__all__ = ["Digger"]
