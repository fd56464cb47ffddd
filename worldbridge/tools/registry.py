# worldbridge/tools/registry.py
from typing import Any, Dict, List, Optional
import asyncio
import logging

from worldbridge.schemas.tool_schemas import create_tool_schema
from worldbridge.tools.base import BaseTool
from worldbridge.tools.building import BuildCubeTool
from worldbridge.tools.config import DEFAULT_WAIT_MS
from worldbridge.tools.gateway.base import WorldSession
from worldbridge.tools.sequence import Sleeper
from worldbridge.tools.world import WorldTool

logger = logging.getLogger(__name__)

TOOL_CLASSES = [BuildCubeTool, WorldTool]


class ToolRegistry:
    """工具注册表 - every tool bound to the same world session"""

    def __init__(self, session: WorldSession, sleep: Sleeper = asyncio.sleep, default_wait_ms: float = DEFAULT_WAIT_MS):
        self.session = session
        self.tools: Dict[str, BaseTool] = {}
        for tool_class in TOOL_CLASSES:
            tool = tool_class(session, sleep=sleep, default_wait_ms=default_wait_ms)
            self.tools[tool.name] = tool
        logger.info(f"Registered tools: {', '.join(self.tools)}")

    def get(self, name: str) -> Optional[BaseTool]:
        return self.tools.get(name)

    def list_schemas(self) -> List[Dict[str, Any]]:
        return [
            create_tool_schema(tool.name, tool.description, tool.input_model)
            for tool in self.tools.values()
        ]
