# Tile constants centralized for modular imports
EMPTY = "."  # undug floor, still walkable once the level is accepted
CORRIDOR = "C"
WALL = "W"
BORDER = "B"  # outer ring; blocks like WALL, drawn differently

FREE_TILES = frozenset({EMPTY, CORRIDOR})
SOLID_TILES = frozenset({WALL, BORDER})
ALL_TILES = FREE_TILES | SOLID_TILES

__all__ = ["EMPTY", "CORRIDOR", "WALL", "BORDER", "FREE_TILES", "SOLID_TILES", "ALL_TILES"]
