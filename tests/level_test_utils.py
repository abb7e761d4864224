"""Shared checks for generated levels.

These re-implement the walkability rules instead of importing them from the
package so the invariant tests do not just echo the code under test.
"""

from collections import deque

EMPTY = "."
CORRIDOR = "C"
WALL = "W"
BORDER = "B"
FREE = {EMPTY, CORRIDOR}
KINDS = {EMPTY, CORRIDOR, WALL, BORDER}


def free_cells(grid):
    return {(r, c) for r, c, kind in grid.cells() if kind in FREE}


def bfs_reachable(grid, start):
    """Return set of (row, col) free cells reachable from start (4-directional)."""
    rows = grid.rows()
    h, w = len(rows), len(rows[0])
    sr, sc = start
    if rows[sr][sc] not in FREE:
        return set()
    q = deque([start])
    vis = {start}
    while q:
        r, c = q.popleft()
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < h and 0 <= nc < w and (nr, nc) not in vis and rows[nr][nc] in FREE:
                vis.add((nr, nc))
                q.append((nr, nc))
    return vis


def outer_ring(grid):
    h, w = grid.height, grid.width
    for c in range(w):
        yield 0, c
        yield h - 1, c
    for r in range(h):
        yield r, 0
        yield r, w - 1


def mirrored_positions(grid, r, c):
    h, w = grid.height, grid.width
    return [(h - 1 - r, c), (r, w - 1 - c), (h - 1 - r, w - 1 - c)]


def assert_level_laws(grid, half_height, half_width, max_empty, min_empty=0.05):
    """Bounds, border ring, symmetry, connectivity and density of an accepted grid."""
    assert grid.size == (half_height * 2, half_width * 2)
    rows = grid.rows()
    assert len(rows) == half_height * 2
    for row in rows:
        assert len(row) == half_width * 2
        assert set(row) <= KINDS, f"Unexpected tile kinds {set(row) - KINDS}"
    for r, c in outer_ring(grid):
        assert rows[r][c] == BORDER, f"Outer ring cell {(r, c)} is {rows[r][c]!r}"
    for r, c, kind in grid.cells():
        for mr, mc in mirrored_positions(grid, r, c):
            assert rows[mr][mc] == kind, f"Symmetry broken between {(r, c)} and {(mr, mc)}"
    free = free_cells(grid)
    density = len(free) / (grid.height * grid.width)
    assert min_empty <= density <= max_empty, f"Density {density:.3f} outside [{min_empty}, {max_empty}]"
    reach = bfs_reachable(grid, next(iter(free)))
    missing = free - reach
    assert not missing, f"Unreachable free cells: {sorted(missing)[:5]} (showing up to 5)"
