from __future__ import annotations

from .grid import Grid


def mirror(half: Grid) -> Grid:
    """Reflect the generated quadrant into a ``2H x 2W`` level with 4-fold symmetry.

    The quadrant lands in the high-row/high-col corner (its origin sits at the
    level center). Columns are reflected first, then the reflected rows are
    copied downward, so the second pass reads an already complete right half.
    """
    h, w = half.size
    full = Grid(h * 2, w * 2)
    for r in range(h, h * 2):
        for c in range(w, w * 2):
            full.set(r, c, half.get(r - h, c - w))
    # Reflect horizontally
    for r in range(h, h * 2):
        for c in range(w - 1, -1, -1):
            full.set(r, c, full.get(r, w + (w - c - 1)))
    # Reflect vertically
    for r in range(h - 1, -1, -1):
        for c in range(w * 2):
            full.set(r, c, full.get(h + (h - r - 1), c))
    return full


__all__ = ["mirror"]
