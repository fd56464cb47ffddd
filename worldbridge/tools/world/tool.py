# worldbridge/tools/world/tool.py
from enum import Enum
from typing import Any, Dict, Optional
import logging
import time

from worldbridge.models.base import ExecutionOutcome
from worldbridge.models.protocol import (
    WorldAction, WorldInput, SetTimeParams, SetWeatherParams, SendMessageParams, RunCommandParams,
)
from worldbridge.tools import results
from worldbridge.tools.base import BaseTool, Handler
from worldbridge.tools.gateway.base import WorldGateway

logger = logging.getLogger(__name__)

# (upper bound exclusive, label) for the 24000 tick day, starting at dawn
TIME_BANDS = [
    (1000, "Dawn"),
    (5000, "Morning"),
    (7000, "Noon"),
    (11000, "Afternoon"),
    (13000, "Dusk"),
    (17000, "Night"),
    (19000, "Midnight"),
]


def get_time_description(ticks: int) -> str:
    """Name the part of the day a tick value falls in, e.g. 6000 -> Noon"""
    if ticks >= 0:
        for upper, label in TIME_BANDS:
            if ticks < upper:
                return label
    return "Late Night"


class WorldTool(BaseTool):
    """World管理工具 - time, weather, players, messages and raw commands"""
    name = "world"
    description = "World management: time, weather, environment, day/night cycles, world queries, connections"
    input_model = WorldInput
    action_type = WorldAction
    error_prefix = "World management error"

    def build_handlers(self) -> Dict[Enum, Handler]:
        return {
            WorldAction.SET_TIME: self.set_time,
            WorldAction.GET_TIME: self.get_time,
            WorldAction.GET_DAY: self.get_day,
            WorldAction.SET_WEATHER: self.set_weather,
            WorldAction.GET_WEATHER: self.get_weather,
            WorldAction.GET_PLAYERS: self.get_players,
            WorldAction.GET_WORLD_INFO: self.get_world_info,
            WorldAction.SEND_MESSAGE: self.send_message,
            WorldAction.RUN_COMMAND: self.run_command,
            WorldAction.GET_CONNECTION_INFO: self.get_connection_info,
            WorldAction.SEQUENCE: self.run_sequence,
        }

    @staticmethod
    def _done(action: WorldAction, message: str, result: Optional[Any] = None) -> ExecutionOutcome:
        return results.success(
            message,
            {"action": action.value, "result": result, "timestamp": int(time.time() * 1000)},
        )

    # ---- 时间 ----------------------------------------------------
    async def set_time(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        params = self.parse_params(WorldAction.SET_TIME.value, SetTimeParams, args)
        await world.set_time_of_day(params.time)
        description = get_time_description(params.time)
        return self._done(
            WorldAction.SET_TIME,
            f"Time set to {params.time} ticks ({description})",
            {"time": params.time, "description": description},
        )

    async def get_time(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        time_of_day = await world.get_time_of_day()
        day = await world.get_day()
        total_ticks = await world.get_current_tick()
        description = get_time_description(time_of_day)
        return self._done(
            WorldAction.GET_TIME,
            f"Current time: {time_of_day} ticks ({description}) on day {day}",
            {"time_of_day": time_of_day, "day": day, "total_ticks": total_ticks, "description": description},
        )

    async def get_day(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        day = await world.get_day()
        return self._done(WorldAction.GET_DAY, f"Current day: {day}", day)

    # ---- 天气 ----------------------------------------------------
    async def set_weather(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        params = self.parse_params(WorldAction.SET_WEATHER.value, SetWeatherParams, args)
        await world.set_weather(params.weather, params.duration)
        if params.duration:
            message = f"Weather set to {params.weather.value} for {params.duration} ticks"
        else:
            message = f"Weather set to {params.weather.value}"
        return self._done(WorldAction.SET_WEATHER, message)

    async def get_weather(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        weather = await world.get_weather()
        return self._done(WorldAction.GET_WEATHER, f"Current weather: {weather.value}", weather.value)

    # ---- 玩家与世界信息 -------------------------------------------
    async def get_players(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        players = await world.get_players()
        return self._done(
            WorldAction.GET_PLAYERS,
            f"Found {len(players)} players online",
            [player.model_dump() for player in players],
        )

    async def get_world_info(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        info = world.get_world_info()
        return self._done(
            WorldAction.GET_WORLD_INFO,
            f"World info retrieved: {info.name}",
            info.model_dump(mode="json"),
        )

    async def get_connection_info(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        info = world.get_world_info()
        return self._done(
            WorldAction.GET_CONNECTION_INFO,
            "Connection info retrieved",
            info.model_dump(mode="json", exclude={"name"}),
        )

    # ---- 消息与命令 ----------------------------------------------
    async def send_message(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        params = self.parse_params(WorldAction.SEND_MESSAGE.value, SendMessageParams, args)
        await world.send_message(params.message, params.target)
        if params.target:
            message = f'Message sent to {params.target}: "{params.message}"'
        else:
            message = f'Message sent to all players: "{params.message}"'
        return self._done(WorldAction.SEND_MESSAGE, message)

    async def run_command(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        params = self.parse_params(WorldAction.RUN_COMMAND.value, RunCommandParams, args)
        response = await world.run_command(params.command)
        logger.info(f"Command executed: {params.command}")
        return self._done(WorldAction.RUN_COMMAND, f"Command executed: {params.command}", response)
