# worldbridge/tools/building/cube.py
from enum import Enum
from typing import Any, Dict
import logging

from worldbridge.models.base import ExecutionOutcome, FillRole
from worldbridge.models.protocol import BuildAction, BuildCubeInput, BuildCubeParams
from worldbridge.tools import results
from worldbridge.tools.base import BaseTool, Handler
from worldbridge.tools.gateway.base import WorldGateway
from worldbridge.tools.geometry import check_region, floor_coordinates, normalize_block_id, plan_fill

logger = logging.getLogger(__name__)


class BuildCubeTool(BaseTool):
    """立方体建造工具 - builds a solid or hollow box between two corners.

    The request runs through the build engine in a fixed order:
    floor the corners onto the lattice, check height band and volume cap,
    plan the fills, then hand each fill to the gateway one at a time.
    Nothing reaches the gateway until the region has passed the guard.

    Example call:
        {"action": "build", "x1": 0, "y1": 64, "z1": 0,
         "x2": 10, "y2": 74, "z2": 10, "material": "glass", "hollow": true}
    """
    name = "build_cube"
    description = (
        "Build CUBE/RECTANGLE: box, rectangle, wall, platform, room, house frame. "
        "Define with 2 corners (x1,y1,z1) to (x2,y2,z2). Coordinates can be positive or negative "
        "(e.g. x:-50, z:-100). Supports sequences for automation."
    )
    input_model = BuildCubeInput
    action_type = BuildAction
    default_action = BuildAction.BUILD.value
    error_prefix = "Building error"

    def build_handlers(self) -> Dict[Enum, Handler]:
        return {
            BuildAction.BUILD: self.build,
            BuildAction.SEQUENCE: self.run_sequence,
        }

    async def build(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        params = self.parse_params(BuildAction.BUILD.value, BuildCubeParams, args)

        region = floor_coordinates(params.x1, params.y1, params.z1, params.x2, params.y2, params.z2)
        region, region_volume = check_region(region)

        block_id = normalize_block_id(params.material)
        plan = plan_fill(region, block_id, params.hollow)
        logger.info(f"Building {'hollow' if params.hollow else 'solid'} cube {region.to_description()} with {block_id}: {len(plan)} fill(s), volume {region_volume}")

        # 净放置数 = 外壳填充数 - 内部清空数
        blocks_placed = 0
        for operation in plan.operations:
            affected = await world.fill_blocks(operation.region.start, operation.region.end, operation.block_id)
            if operation.role is FillRole.CLEAR:
                blocks_placed -= affected
            else:
                blocks_placed += affected

        start, end = region.start, region.end
        return results.success(
            f"{'Hollow' if params.hollow else 'Solid'} cube built with {block_id} "
            f"from ({start.x},{start.y},{start.z}) to ({end.x},{end.y},{end.z}). Placed {blocks_placed} blocks.",
            {
                "type": "cube",
                "from": start.to_dict(),
                "to": end.to_dict(),
                "material": block_id,
                "hollow": params.hollow,
                "volume": blocks_placed,
                "region_volume": region_volume,
                "gateway": world.name,
            },
        )
