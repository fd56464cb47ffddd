from .base import WorldGateway, WorldSession
from .memory import InMemoryWorld
from .commands import CommandWorld, CommandTransport

__all__ = ['WorldGateway', 'WorldSession', 'InMemoryWorld', 'CommandWorld', 'CommandTransport']
