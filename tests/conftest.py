import pytest

from worldbridge.tools.building import BuildCubeTool
from worldbridge.tools.gateway import InMemoryWorld, WorldSession
from worldbridge.tools.world import WorldTool


class RecordingWorld(InMemoryWorld):
    """InMemoryWorld that remembers every gateway call it served"""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.fill_calls = []
        self.calls = []

    async def fill_blocks(self, start, end, block_id):
        self.fill_calls.append((start.to_tuple(), end.to_tuple(), block_id))
        return await super().fill_blocks(start, end, block_id)

    async def set_time_of_day(self, ticks):
        self.calls.append(("set_time_of_day", ticks))
        await super().set_time_of_day(ticks)

    async def set_weather(self, weather, duration=None):
        self.calls.append(("set_weather", weather, duration))
        await super().set_weather(weather, duration)

    async def send_message(self, message, target=None):
        self.calls.append(("send_message", message, target))
        await super().send_message(message, target)

    async def run_command(self, command):
        self.calls.append(("run_command", command))
        return await super().run_command(command)


class FakeSleep:
    """Stands in for asyncio.sleep and records the requested delays"""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def world():
    return RecordingWorld()


@pytest.fixture
def session(world):
    return WorldSession(world)


@pytest.fixture
def sleeper():
    return FakeSleep()


@pytest.fixture
def build_tool(session, sleeper):
    return BuildCubeTool(session, sleep=sleeper)


@pytest.fixture
def world_tool(session, sleeper):
    return WorldTool(session, sleep=sleeper)
