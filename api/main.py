from contextlib import asynccontextmanager
from typing import Any, Dict, List
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()

from worldbridge.models.base import ExecutionOutcome
from worldbridge.tools.config import get_world_config
from worldbridge.tools.gateway import InMemoryWorld, WorldSession
from worldbridge.tools.registry import ToolRegistry

config = get_world_config()

# 配置日志
logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)

# 初始化工具
session = WorldSession()
registry = ToolRegistry(session, default_wait_ms=config.default_wait_ms)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """服务启动时连接配置的世界后端"""
    if config.backend == "memory":
        session.connect(InMemoryWorld(world_name=config.world_name))
    elif config.backend == "none":
        logger.info("WORLD_BACKEND=none, starting without a connected world")
    else:
        logger.warning(f"Unknown WORLD_BACKEND '{config.backend}', starting without a connected world")
    yield
    session.disconnect()


app = FastAPI(title="worldbridge", lifespan=lifespan)

# 启用CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "connected": session.is_connected,
        "world": session.world.name if session.is_connected else None,
    }


@app.get("/tools")
async def list_tools() -> List[Dict[str, Any]]:
    """列出所有工具及其输入schema"""
    return registry.list_schemas()


@app.post("/tools/{tool_name}", response_model=ExecutionOutcome)
async def call_tool(tool_name: str, args: Dict[str, Any]):
    """
    统一工具调用入口

    Body is the call object, `{action, ...fields}` or `{action: "sequence", steps: [...]}`.
    Tool failures come back as an ExecutionOutcome with success=false, not as HTTP errors.
    """
    tool = registry.get(tool_name)
    if tool is None:
        raise HTTPException(404, f"Unknown tool: {tool_name}")

    logger.info(f"Tool call {tool_name}: action={args.get('action', tool.default_action)}")
    outcome = await tool.execute(args)
    if not outcome.success:
        logger.info(f"Tool call {tool_name} failed: {outcome.message}")
    return outcome


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.host, port=config.port)
