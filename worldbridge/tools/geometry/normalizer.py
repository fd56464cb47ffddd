# worldbridge/tools/geometry/normalizer.py
import math

from worldbridge.models.base import Region
from worldbridge.tools.config import DEFAULT_NAMESPACE


def floor_coordinates(x1: float, y1: float, z1: float, x2: float, y2: float, z2: float) -> Region:
    """Snap two corner points onto the block lattice, flooring toward negative infinity"""
    return Region.from_coords(
        math.floor(x1), math.floor(y1), math.floor(z1),
        math.floor(x2), math.floor(y2), math.floor(z2),
    )


def normalize_block_id(material: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Prefix a bare block name with the default namespace.

    "stone" -> "minecraft:stone"; ids that already carry a namespace
    separator are returned untouched.
    """
    block_id = material.strip()
    if ":" not in block_id:
        block_id = f"{namespace}:{block_id}"
    return block_id
