# worldbridge/tools/gateway/base.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import logging

from worldbridge.models.base import Position
from worldbridge.models.world_state import WeatherType, PlayerInfo, WorldInfo
from worldbridge.tools.errors import WorldUnavailableError

logger = logging.getLogger(__name__)


class WorldGateway(ABC):
    """世界网关基础接口 - remote read/write access to one world.

    Every call is a single round trip. Implementations raise on failure and
    never retry; the tools turn the exception into a failed outcome.
    """
    name: str = "gateway"

    @abstractmethod
    async def fill_blocks(self, start: Position, end: Position, block_id: str) -> int:
        """Fill the inclusive box between two corners, return the affected block count"""
        pass

    @abstractmethod
    async def set_time_of_day(self, ticks: int) -> None:
        pass

    @abstractmethod
    async def get_time_of_day(self) -> int:
        pass

    @abstractmethod
    async def get_day(self) -> int:
        pass

    @abstractmethod
    async def get_current_tick(self) -> int:
        pass

    @abstractmethod
    async def set_weather(self, weather: WeatherType, duration: Optional[int] = None) -> None:
        pass

    @abstractmethod
    async def get_weather(self) -> WeatherType:
        pass

    @abstractmethod
    async def get_players(self) -> List[PlayerInfo]:
        pass

    @abstractmethod
    async def send_message(self, message: str, target: Optional[str] = None) -> None:
        pass

    @abstractmethod
    async def run_command(self, command: str) -> Dict[str, Any]:
        pass

    @abstractmethod
    def get_world_info(self) -> WorldInfo:
        pass


class WorldSession:
    """Holds the gateway of the single automation session, if one is connected"""

    def __init__(self, gateway: Optional[WorldGateway] = None):
        self._gateway = gateway

    @property
    def is_connected(self) -> bool:
        return self._gateway is not None

    @property
    def world(self) -> WorldGateway:
        """The connected gateway; raises WorldUnavailableError when there is none"""
        if self._gateway is None:
            raise WorldUnavailableError()
        return self._gateway

    def connect(self, gateway: WorldGateway) -> None:
        self._gateway = gateway
        logger.info(f"World session connected via {gateway.name}")

    def disconnect(self) -> None:
        if self._gateway is not None:
            logger.info(f"World session disconnected from {self._gateway.name}")
        self._gateway = None
