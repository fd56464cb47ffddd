# worldbridge/tools/errors.py
from typing import List

from pydantic import ValidationError

from worldbridge.tools.config import MIN_HEIGHT, MAX_HEIGHT, MAX_FILL_VOLUME

UNAVAILABLE_MESSAGE = "World not available. Ensure Minecraft is connected."


class ToolError(Exception):
    """Base class for every failure a tool turns into a failed outcome"""


class WorldValidationError(ToolError):
    """Request rejected before any remote call was made"""


class OutOfBoundsError(WorldValidationError):
    def __init__(self, message: str = f"Y coordinates must be between {MIN_HEIGHT} and {MAX_HEIGHT}"):
        super().__init__(message)


class VolumeExceededError(WorldValidationError):
    def __init__(self, volume: int):
        self.volume = volume
        super().__init__(f"Volume too large (maximum {MAX_FILL_VOLUME} blocks)")


class UnknownActionError(WorldValidationError):
    def __init__(self, action: str, supported: List[str]):
        self.action = action
        self.supported = supported
        super().__init__(f"Unknown action: {action}. Supported actions: {', '.join(supported)}")


class WorldUnavailableError(ToolError):
    """No world session is connected"""
    def __init__(self, message: str = UNAVAILABLE_MESSAGE):
        super().__init__(message)


class GatewayError(ToolError):
    """The remote world rejected or failed a call"""


def describe_validation_error(action: str, error: ValidationError) -> str:
    """Format a pydantic ValidationError as one readable line"""
    problems = []
    for item in error.errors():
        field = ".".join(str(part) for part in item.get("loc", ())) or "params"
        problems.append(f"{field}: {item.get('msg', 'invalid value')}")
    return f"Invalid parameters for {action}: {'; '.join(problems)}"
