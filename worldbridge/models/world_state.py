# worldbridge/models/world_state.py
# Values reported by the world gateway about the remote world

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class WeatherType(str, Enum):
    """Weather states understood by the world"""
    CLEAR = "clear"
    RAIN = "rain"
    THUNDER = "thunder"

    @classmethod
    def from_str(cls, value: str) -> 'WeatherType':
        """Create enum value from string, case-insensitive"""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid weather value: {value}. Must be one of: {[w.value for w in cls]}")


class PlayerInfo(BaseModel):
    """Player currently connected to the world"""
    name: str
    is_local: bool = Field(False, description="True for the player hosting the automation connection")


class WorldInfo(BaseModel):
    """Connection level information about the world session

    Attributes:
        name (str): Display name of the connected world
        connected_at (datetime): When the gateway connected
        average_ping (float): Average round trip to the world in milliseconds
        max_players (int): Player capacity reported by the world
        is_valid (bool): Whether the connection is still usable
    """
    name: str
    connected_at: datetime
    average_ping: float = 0.0
    max_players: Optional[int] = None
    is_valid: bool = True
