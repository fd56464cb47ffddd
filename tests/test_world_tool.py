import asyncio

import pytest

from worldbridge.models.world_state import PlayerInfo, WeatherType
from worldbridge.tools.gateway import InMemoryWorld, WorldSession
from worldbridge.tools.world import WorldTool, get_time_description


def call(tool, action, **fields):
    return asyncio.run(tool.execute({"action": action, **fields}))


@pytest.mark.parametrize("ticks, label", [
    (0, "Dawn"),
    (999, "Dawn"),
    (1000, "Morning"),
    (6000, "Noon"),
    (7000, "Afternoon"),
    (12000, "Dusk"),
    (13000, "Night"),
    (18000, "Midnight"),
    (19000, "Late Night"),
    (24000, "Late Night"),
])
def test_time_descriptions(ticks, label):
    assert get_time_description(ticks) == label


def test_set_time_noon(world_tool, world):
    outcome = call(world_tool, "set_time", time=6000)

    assert outcome.success
    assert outcome.message == "Time set to 6000 ticks (Noon)"
    assert outcome.data["action"] == "set_time"
    assert outcome.data["result"]["description"] == "Noon"
    assert isinstance(outcome.data["timestamp"], int)
    assert world.calls == [("set_time_of_day", 6000)]


def test_set_time_out_of_range_never_reaches_world(world_tool, world):
    outcome = call(world_tool, "set_time", time=25000)

    assert not outcome.success
    assert outcome.message.startswith("Invalid parameters for set_time")
    assert world.calls == []


def test_set_time_requires_time(world_tool, world):
    outcome = call(world_tool, "set_time")

    assert not outcome.success
    assert "time" in outcome.message
    assert world.calls == []


def test_get_time(world_tool, world):
    world.time_of_day = 13500
    world.day = 4
    world.current_tick = 109500

    outcome = call(world_tool, "get_time")

    assert outcome.success
    assert outcome.data["result"] == {
        "time_of_day": 13500, "day": 4, "total_ticks": 109500, "description": "Night",
    }
    assert outcome.message == "Current time: 13500 ticks (Night) on day 4"


def test_get_day(world_tool, world):
    world.day = 12
    outcome = call(world_tool, "get_day")
    assert outcome.data["result"] == 12
    assert outcome.message == "Current day: 12"


def test_set_weather_is_case_insensitive(world_tool, world):
    outcome = call(world_tool, "set_weather", weather="Thunder", duration=600)

    assert outcome.success
    assert outcome.message == "Weather set to thunder for 600 ticks"
    assert world.calls == [("set_weather", WeatherType.THUNDER, 600)]


def test_set_weather_rejects_unknown_type(world_tool, world):
    outcome = call(world_tool, "set_weather", weather="snow")

    assert not outcome.success
    assert world.calls == []


def test_get_weather(world_tool, world):
    world.weather = WeatherType.RAIN
    outcome = call(world_tool, "get_weather")
    assert outcome.data["result"] == "rain"
    assert outcome.message == "Current weather: rain"


def test_get_players(sleeper):
    world = InMemoryWorld(players=[PlayerInfo(name="Steve", is_local=True), PlayerInfo(name="Alex")])
    tool = WorldTool(WorldSession(world), sleep=sleeper)

    outcome = call(tool, "get_players")

    assert outcome.message == "Found 2 players online"
    assert outcome.data["result"] == [
        {"name": "Steve", "is_local": True},
        {"name": "Alex", "is_local": False},
    ]


def test_world_and_connection_info(world_tool):
    info = call(world_tool, "get_world_info")
    connection = call(world_tool, "get_connection_info")

    assert info.message == "World info retrieved: Bedrock level"
    assert set(info.data["result"]) == {"name", "connected_at", "average_ping", "max_players", "is_valid"}
    assert "name" not in connection.data["result"]
    assert connection.data["result"]["is_valid"] is True


def test_send_message_to_all_and_to_target(world_tool, world):
    broadcast = call(world_tool, "send_message", message="Hello")
    direct = call(world_tool, "send_message", message="Hi", target="Alex")

    assert broadcast.message == 'Message sent to all players: "Hello"'
    assert direct.message == 'Message sent to Alex: "Hi"'
    assert world.messages == [(None, "Hello"), ("Alex", "Hi")]


def test_run_command(world_tool, world):
    outcome = call(world_tool, "run_command", command="give @p diamond_sword")

    assert outcome.success
    assert outcome.message == "Command executed: give @p diamond_sword"
    assert outcome.data["result"]["statusCode"] == 0
    assert world.commands == ["give @p diamond_sword"]


def test_unknown_and_missing_action(world_tool):
    unknown = call(world_tool, "explode")
    missing = asyncio.run(world_tool.execute({}))

    assert not unknown.success
    assert unknown.message.startswith("Unknown action: explode")
    assert not missing.success
    assert missing.message == "action is required for world"


def test_every_action_has_a_handler(world_tool):
    # construction would have raised otherwise; the table covers the enum exactly
    assert set(world_tool._handlers) == set(world_tool.action_type)


def test_disconnected_world(sleeper):
    session = WorldSession(InMemoryWorld())
    tool = WorldTool(session, sleep=sleeper)
    session.disconnect()

    outcome = call(tool, "get_weather")

    assert not outcome.success
    assert outcome.message == "World not available. Ensure Minecraft is connected."


class FailingWorld(InMemoryWorld):
    async def run_command(self, command):
        raise ConnectionError("socket closed")


def test_gateway_failure_keeps_message(sleeper):
    tool = WorldTool(WorldSession(FailingWorld()), sleep=sleeper)
    outcome = call(tool, "run_command", command="say hi")

    assert not outcome.success
    assert outcome.message == "World management error: socket closed"
