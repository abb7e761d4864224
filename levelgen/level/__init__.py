"""Public level generator interface.

    from levelgen.level import LevelConfig, generate_level
    level = generate_level(LevelConfig(half_height=15, half_width=14), seed=42)
    level.grid.to_text()
"""

from .blueprints import DOWN, LEFT, MOVES, RIGHT, UP, WALL_BLUEPRINTS, WallBlueprint
from .builder import build, can_build
from .config import LevelConfig
from .digger import Digger
from .errors import ConfigError, GenerationExhausted, LevelGenError
from .grid import Grid
from .mirror import mirror
from .pipeline import Level, LevelGenerator, generate_level
from .tiles import BORDER, CORRIDOR, EMPTY, FREE_TILES, SOLID_TILES, WALL
from .validator import ValidationReport, check_level, flood_fill, validate
from .variants import Variant, border_variant, variant_map, wall_variant

__all__ = [
    "Level",
    "LevelConfig",
    "LevelGenerator",
    "generate_level",
    "Grid",
    "Digger",
    "WallBlueprint",
    "WALL_BLUEPRINTS",
    "MOVES",
    "UP",
    "RIGHT",
    "DOWN",
    "LEFT",
    "build",
    "can_build",
    "mirror",
    "validate",
    "check_level",
    "flood_fill",
    "ValidationReport",
    "Variant",
    "wall_variant",
    "border_variant",
    "variant_map",
    "LevelGenError",
    "ConfigError",
    "GenerationExhausted",
    "EMPTY",
    "CORRIDOR",
    "WALL",
    "BORDER",
    "FREE_TILES",
    "SOLID_TILES",
]
