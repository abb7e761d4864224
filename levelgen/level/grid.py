"""Owned 2D tile container used by every generation phase.

Cells are addressed ``(row, col)``. Row 0 is the bottom row of the level, so
``to_lines`` prints rows in reverse to show the level the right way up.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .tiles import ALL_TILES, EMPTY, FREE_TILES

Coord2D = Tuple[int, int]


class Grid:
    """Fixed-size ``height x width`` matrix of tile characters."""

    __slots__ = ("_height", "_width", "_cells")

    def __init__(self, height: int, width: int, fill: str = EMPTY):
        if height <= 0 or width <= 0:
            raise ValueError(f"grid dimensions must be positive, got {height}x{width}")
        self._height = height
        self._width = width
        self._cells: List[List[str]] = [[fill for _ in range(width)] for _ in range(height)]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Grid":
        """Build a grid from ``to_lines`` output (top row first)."""
        rows = list(reversed([line for line in lines if line]))
        if not rows:
            raise ValueError("no rows supplied")
        width = len(rows[0])
        grid = cls(len(rows), width)
        for r, line in enumerate(rows):
            if len(line) != width:
                raise ValueError(f"row {r} has width {len(line)}, expected {width}")
            for c, ch in enumerate(line):
                if ch not in ALL_TILES:
                    raise ValueError(f"unknown tile {ch!r} at {(r, c)}")
                grid._cells[r][c] = ch
        return grid

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def size(self) -> Tuple[int, int]:
        return (self._height, self._width)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell {(row, col)} outside {self._height}x{self._width} grid")

    def get(self, row: int, col: int) -> str:
        self._check(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, kind: str) -> None:
        self._check(row, col)
        self._cells[row][col] = kind

    def __getitem__(self, pos: Coord2D) -> str:
        return self.get(*pos)

    def __setitem__(self, pos: Coord2D, kind: str) -> None:
        self.set(pos[0], pos[1], kind)

    def is_free(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._cells[row][col] in FREE_TILES

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        for r, row in enumerate(self._cells):
            for c, kind in enumerate(row):
                yield r, c, kind

    def count(self, kind: str) -> int:
        return sum(row.count(kind) for row in self._cells)

    def rows(self) -> List[List[str]]:
        return [row[:] for row in self._cells]

    def copy(self) -> "Grid":
        other = Grid(self._height, self._width)
        other._cells = self.rows()
        return other

    def to_lines(self) -> List[str]:
        return ["".join(row) for row in reversed(self._cells)]

    def to_text(self) -> str:
        return "\n".join(self.to_lines())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self._height}x{self._width})"


__all__ = ["Grid", "Coord2D"]
