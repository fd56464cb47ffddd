# worldbridge/tools/geometry/planner.py
"""
Region fill planning - turns a validated region into the ordered fills sent to the world.

A solid build is a single fill. A hollow build fills the whole box first and
then clears the interior with air, one block in from every face. Boxes thinner
than three blocks along any axis have no interior, so only the first fill is
planned for them.
"""

from typing import Optional

from worldbridge.models.base import Region, FillOperation, FillPlan, FillRole
from worldbridge.tools.config import EMPTY_BLOCK


def inner_region(region: Region) -> Optional[Region]:
    """Region shrunk by one block on every side, or None when nothing is left"""
    low, high = region.min_corner(), region.max_corner()
    inner = Region.from_coords(
        low.x + 1, low.y + 1, low.z + 1,
        high.x - 1, high.y - 1, high.z - 1,
    )
    if inner.start.x <= inner.end.x and inner.start.y <= inner.end.y and inner.start.z <= inner.end.z:
        return inner
    return None


def plan_fill(region: Region, block_id: str, hollow: bool = False) -> FillPlan:
    """Build the fill plan for one cube request"""
    plan = FillPlan(operations=[FillOperation(region=region, block_id=block_id, role=FillRole.PLACE)])

    if hollow:
        inner = inner_region(region)
        if inner is not None:
            plan.operations.append(FillOperation(region=inner, block_id=EMPTY_BLOCK, role=FillRole.CLEAR))

    return plan
