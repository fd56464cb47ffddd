# worldbridge/models/protocol.py
# Tool call protocol models - define the call shape accepted from the automation client

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Dict, Any, Optional, Literal
from enum import Enum

from worldbridge.models.world_state import WeatherType

WAIT_STEP = "wait"

# =============================================================================
# Action Vocabularies
# =============================================================================

class BuildAction(str, Enum):
    """Actions understood by the build_cube tool"""
    BUILD = "build"
    SEQUENCE = "sequence"


class WorldAction(str, Enum):
    """Actions understood by the world tool"""
    SET_TIME = "set_time"
    GET_TIME = "get_time"
    GET_DAY = "get_day"
    SET_WEATHER = "set_weather"
    GET_WEATHER = "get_weather"
    GET_PLAYERS = "get_players"
    GET_WORLD_INFO = "get_world_info"
    SEND_MESSAGE = "send_message"
    RUN_COMMAND = "run_command"
    GET_CONNECTION_INFO = "get_connection_info"
    SEQUENCE = "sequence"

# =============================================================================
# Sequence Models
# =============================================================================

class SequenceStep(BaseModel):
    """One step of a sequence

    `type` is either the literal "wait" or an action name of the tool that owns
    the sequence. Every other field is forwarded to that action as a parameter.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True, allow_inf_nan=False)

    type: str = Field(..., min_length=1, description="'wait' or an action name of the owning tool")
    wait_ms: Optional[float] = Field(None, alias="waitMs", description="Delay in milliseconds for wait steps")
    description: Optional[str] = Field(None, description="Optional human-readable label for the step")

    def is_wait(self) -> bool:
        return self.type == WAIT_STEP

    def action_params(self) -> Dict[str, Any]:
        """Fields forwarded to the delegated action, with `type` mapped to `action`"""
        params = dict(self.model_extra or {})
        params["action"] = self.type
        return params

    def describe(self) -> str:
        if self.description:
            return self.description
        if self.is_wait():
            return f"wait {self.wait_ms:g}ms" if self.wait_ms is not None else "wait"
        return self.type


class SequenceParams(BaseModel):
    """sequence action parameters"""
    steps: List[SequenceStep] = Field(..., description="Ordered steps; each has a 'type' field and the parameters of that action")

# =============================================================================
# Build Parameter Models
# =============================================================================

class BuildCubeParams(BaseModel):
    """build action parameters

    Coordinates may be fractional or negative; they are floored to the block
    lattice before validation.
    """
    model_config = ConfigDict(allow_inf_nan=False)

    x1: float = Field(..., description="Starting X coordinate (east-west, can be negative like -50)")
    y1: float = Field(..., description="Starting Y coordinate (height, usually 64-100 for ground level)")
    z1: float = Field(..., description="Starting Z coordinate (north-south, can be negative like -100)")
    x2: float = Field(..., description="Ending X coordinate (east-west, can be negative)")
    y2: float = Field(..., description="Ending Y coordinate (height, can be higher than y1 for tall structures)")
    z2: float = Field(..., description="Ending Z coordinate (north-south, can be negative)")
    material: str = Field("minecraft:stone", min_length=1, description="Block material to use")
    hollow: bool = Field(False, description="Create hollow cube (default: false)")

# =============================================================================
# World Parameter Models
# =============================================================================

class SetTimeParams(BaseModel):
    """set_time action parameters"""
    time: int = Field(..., ge=0, le=24000, description="Time in ticks (0-24000, where 0=dawn, 6000=noon, 12000=dusk, 18000=midnight)")


class SetWeatherParams(BaseModel):
    """set_weather action parameters"""
    weather: WeatherType = Field(..., description="Weather type to set")
    duration: Optional[int] = Field(None, ge=0, description="Weather duration in ticks (optional)")

    @field_validator("weather", mode="before")
    @classmethod
    def lower_weather(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class SendMessageParams(BaseModel):
    """send_message action parameters"""
    message: str = Field(..., min_length=1, description="Message to send to all players")
    target: Optional[str] = Field(None, description="Target player for message (optional, defaults to all players)")


class RunCommandParams(BaseModel):
    """run_command action parameters"""
    command: str = Field(..., min_length=1, description="Bedrock Edition command to execute (without /)")

# =============================================================================
# Published Tool Inputs
# =============================================================================

class BuildCubeInput(BuildCubeParams):
    """Full input surface of the build_cube tool, published as its input schema"""
    action: Literal["build", "sequence"] = Field("build", description="Build action to perform")
    steps: Optional[List[SequenceStep]] = Field(None, description="Array of build steps for sequence. Each step should have \"type\" field and relevant parameters.")


class WorldInput(BaseModel):
    """Full input surface of the world tool, published as its input schema"""
    action: WorldAction = Field(..., description="World management action to perform")
    time: Optional[int] = Field(None, ge=0, le=24000, description="Time in ticks (0-24000, where 0=dawn, 6000=noon, 12000=dusk, 18000=midnight)")
    weather: Optional[WeatherType] = Field(None, description="Weather type to set")
    duration: Optional[int] = Field(None, ge=0, description="Weather duration in ticks (optional)")
    message: Optional[str] = Field(None, description="Message to send to all players")
    target: Optional[str] = Field(None, description="Target player for message (optional, defaults to all players)")
    command: Optional[str] = Field(None, description="Bedrock Edition command to execute (without /). Examples: \"give @p diamond_sword\", \"tp @p 0 64 0\"")
    steps: Optional[List[SequenceStep]] = Field(None, description="Array of world actions for sequence. Each step should have \"type\" field and relevant parameters.")
