# worldbridge/tools/gateway/commands.py
"""
CommandWorld - drives the world purely through Bedrock slash commands.

Each gateway capability is rendered as one command string and handed to an
injected transport. The transport owns the connection and the wire format;
this module only knows command syntax and how to read the response body the
game sends back (statusCode, statusMessage and command specific fields such
as fillCount or data).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol
import json
import logging
import re
import time

from worldbridge.models.base import Position
from worldbridge.models.world_state import WeatherType, PlayerInfo, WorldInfo
from worldbridge.tools.errors import GatewayError
from .base import WorldGateway

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"-?\d+")


class CommandTransport(Protocol):
    """Sends one command to the game and returns the decoded response body"""

    async def send(self, command: str) -> Dict[str, Any]:
        ...


class CommandWorld(WorldGateway):
    name = "command"

    def __init__(self, transport: CommandTransport, world_name: str = "Bedrock level"):
        self.transport = transport
        self.world_name = world_name
        self.connected_at = datetime.now()
        self.max_players: Optional[int] = None
        self._ping_total = 0.0
        self._ping_count = 0
        self._valid = True

    async def _send(self, command: str) -> Dict[str, Any]:
        started = time.monotonic()
        try:
            response = await self.transport.send(command)
        except Exception:
            self._valid = False
            raise
        self._ping_total += (time.monotonic() - started) * 1000
        self._ping_count += 1

        status = response.get("statusCode", 0)
        if status != 0:
            message = response.get("statusMessage") or f"Command failed with status {status}"
            logger.warning(f"Command '{command}' failed: {message}")
            raise GatewayError(message)
        return response

    @staticmethod
    def _read_int(response: Dict[str, Any], key: str) -> int:
        """Read a numeric field, falling back to the first number in statusMessage"""
        value = response.get(key)
        if isinstance(value, (int, float)):
            return int(value)
        match = _NUMBER.search(str(response.get("statusMessage", "")))
        if match is None:
            raise GatewayError(f"Response has no {key}: {response}")
        return int(match.group())

    @staticmethod
    def _format_target(target: Optional[str]) -> str:
        if not target:
            return "@a"
        if target.startswith("@"):
            return target
        return f'"{target}"' if " " in target else target

    async def fill_blocks(self, start: Position, end: Position, block_id: str) -> int:
        response = await self._send(
            f"fill {start.x} {start.y} {start.z} {end.x} {end.y} {end.z} {block_id}"
        )
        return self._read_int(response, "fillCount")

    async def set_time_of_day(self, ticks: int) -> None:
        await self._send(f"time set {ticks}")

    async def get_time_of_day(self) -> int:
        return self._read_int(await self._send("time query daytime"), "data")

    async def get_day(self) -> int:
        return self._read_int(await self._send("time query day"), "data")

    async def get_current_tick(self) -> int:
        return self._read_int(await self._send("time query gametime"), "data")

    async def set_weather(self, weather: WeatherType, duration: Optional[int] = None) -> None:
        command = f"weather {weather.value}"
        if duration is not None:
            command += f" {duration}"
        await self._send(command)

    async def get_weather(self) -> WeatherType:
        response = await self._send("weather query")
        words = str(response.get("statusMessage", "")).replace(":", " ").split()
        for word in reversed(words):
            try:
                return WeatherType.from_str(word.strip("."))
            except ValueError:
                continue
        raise GatewayError(f"Unrecognised weather response: {response}")

    async def get_players(self) -> List[PlayerInfo]:
        response = await self._send("list")
        if isinstance(response.get("maxPlayerCount"), int):
            self.max_players = response["maxPlayerCount"]
        names = [name.strip() for name in str(response.get("players", "")).split(",") if name.strip()]

        local_name = None
        if names:
            local = await self._send("getlocalplayername")
            local_name = local.get("localplayername")
        return [PlayerInfo(name=name, is_local=name == local_name) for name in names]

    async def send_message(self, message: str, target: Optional[str] = None) -> None:
        rawtext = json.dumps({"rawtext": [{"text": message}]}, ensure_ascii=False)
        await self._send(f"tellraw {self._format_target(target)} {rawtext}")

    async def run_command(self, command: str) -> Dict[str, Any]:
        return await self._send(command.lstrip("/"))

    def get_world_info(self) -> WorldInfo:
        average = self._ping_total / self._ping_count if self._ping_count else 0.0
        return WorldInfo(
            name=self.world_name,
            connected_at=self.connected_at,
            average_ping=round(average, 2),
            max_players=self.max_players,
            is_valid=self._valid,
        )
