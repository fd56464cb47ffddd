from .normalizer import floor_coordinates, normalize_block_id
from .guard import compute_volume, check_region
from .planner import inner_region, plan_fill

__all__ = [
    'floor_coordinates', 'normalize_block_id',
    'compute_volume', 'check_region',
    'inner_region', 'plan_fill',
]
