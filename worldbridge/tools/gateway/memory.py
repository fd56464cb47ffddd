# worldbridge/tools/gateway/memory.py
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
import logging

from worldbridge.models.base import Position, Region
from worldbridge.models.world_state import WeatherType, PlayerInfo, WorldInfo
from worldbridge.tools.config import EMPTY_BLOCK
from .base import WorldGateway

logger = logging.getLogger(__name__)

TICKS_PER_DAY = 24000


class InMemoryWorld(WorldGateway):
    """In-process block world used for local runs and tests.

    Blocks are stored sparsely; any position that was never written, or was
    filled with air, reads back as air. A fill reports every block it touched.
    """
    name = "memory"

    def __init__(self, world_name: str = "Bedrock level", players: Optional[List[PlayerInfo]] = None, max_players: int = 10):
        self.world_name = world_name
        self.blocks: Dict[Tuple[int, int, int], str] = {}
        self.time_of_day = 0
        self.day = 0
        self.current_tick = 0
        self.weather = WeatherType.CLEAR
        self.weather_duration: Optional[int] = None
        self.players = players if players is not None else [PlayerInfo(name="Steve", is_local=True)]
        self.max_players = max_players
        self.messages: List[Tuple[Optional[str], str]] = []
        self.commands: List[str] = []
        self.connected_at = datetime.now()

    def get_block(self, x: int, y: int, z: int) -> str:
        return self.blocks.get((x, y, z), EMPTY_BLOCK)

    async def fill_blocks(self, start: Position, end: Position, block_id: str) -> int:
        affected = 0
        for key in Region(start=start, end=end).positions():
            if block_id == EMPTY_BLOCK:
                self.blocks.pop(key, None)
            else:
                self.blocks[key] = block_id
            affected += 1
        logger.debug(f"Filled {affected} blocks with {block_id} from {start.to_compact_str()} to {end.to_compact_str()}")
        return affected

    async def set_time_of_day(self, ticks: int) -> None:
        self.time_of_day = ticks % TICKS_PER_DAY

    async def get_time_of_day(self) -> int:
        return self.time_of_day

    async def get_day(self) -> int:
        return self.day

    async def get_current_tick(self) -> int:
        return self.current_tick

    async def set_weather(self, weather: WeatherType, duration: Optional[int] = None) -> None:
        self.weather = weather
        self.weather_duration = duration

    async def get_weather(self) -> WeatherType:
        return self.weather

    async def get_players(self) -> List[PlayerInfo]:
        return list(self.players)

    async def send_message(self, message: str, target: Optional[str] = None) -> None:
        self.messages.append((target, message))

    async def run_command(self, command: str) -> Dict[str, Any]:
        self.commands.append(command)
        return {"statusCode": 0, "statusMessage": f"Executed: {command}"}

    def get_world_info(self) -> WorldInfo:
        return WorldInfo(
            name=self.world_name,
            connected_at=self.connected_at,
            average_ping=0.0,
            max_players=self.max_players,
            is_valid=True,
        )
