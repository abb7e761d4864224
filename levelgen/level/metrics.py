from typing import Any, Dict

from .grid import Grid
from .tiles import BORDER, CORRIDOR, EMPTY, WALL


def init_metrics() -> Dict[str, Any]:
    return {
        'seed': None,
        'attempts': 0,
        'rejected_density_low': 0,
        'rejected_density_high': 0,
        'rejected_disconnected': 0,
        'walls_built': 0,
        'corridors_dug': 0,
        'digger_passes': 0,
        'free_cells': 0,
        'density': 0.0,
        'runtime_ms': 0,
        'phase_ms': {},
    }


def tile_counts(grid: Grid) -> Dict[str, int]:
    return {
        'tiles_corridor': grid.count(CORRIDOR),
        'tiles_wall': grid.count(WALL),
        'tiles_border': grid.count(BORDER),
        'tiles_empty': grid.count(EMPTY),
    }
