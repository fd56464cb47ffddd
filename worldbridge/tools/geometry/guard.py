# worldbridge/tools/geometry/guard.py
from typing import Tuple

from worldbridge.models.base import Region
from worldbridge.tools.config import MIN_HEIGHT, MAX_HEIGHT, MAX_FILL_VOLUME
from worldbridge.tools.errors import OutOfBoundsError, VolumeExceededError


def compute_volume(region: Region) -> int:
    """Bounding volume of a region, bounds inclusive on both ends"""
    start, end = region.start, region.end
    return (
        (abs(end.x - start.x) + 1)
        * (abs(end.y - start.y) + 1)
        * (abs(end.z - start.z) + 1)
    )


def check_region(region: Region) -> Tuple[Region, int]:
    """Validate a normalized region before any fill is issued.

    Raises:
        OutOfBoundsError: either corner's y lies outside the world height band
        VolumeExceededError: the region holds more blocks than a single fill may touch

    Returns:
        The region unchanged together with its computed volume
    """
    for y in (region.start.y, region.end.y):
        if y < MIN_HEIGHT or y > MAX_HEIGHT:
            raise OutOfBoundsError()

    volume = compute_volume(region)
    if volume > MAX_FILL_VOLUME:
        raise VolumeExceededError(volume)

    return region, volume
