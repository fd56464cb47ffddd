import os
from dataclasses import dataclass

# World limits enforced before any fill reaches the gateway
MIN_HEIGHT = -64
MAX_HEIGHT = 320
MAX_FILL_VOLUME = 32768

DEFAULT_NAMESPACE = "minecraft"
DEFAULT_MATERIAL = "minecraft:stone"
EMPTY_BLOCK = "minecraft:air"

DEFAULT_WAIT_MS = 1000


@dataclass(frozen=True)
class WorldConfig:
    backend: str
    world_name: str
    default_wait_ms: float
    host: str
    port: int
    log_level: str


def get_world_config() -> WorldConfig:
    """集中管理运行配置：支持从环境变量读取并提供默认值。"""
    return WorldConfig(
        backend=os.getenv("WORLD_BACKEND", "memory").strip().lower(),
        world_name=os.getenv("WORLD_NAME", "Bedrock level"),
        default_wait_ms=float(os.getenv("WORLD_DEFAULT_WAIT_MS", DEFAULT_WAIT_MS)),
        host=os.getenv("WORLDBRIDGE_HOST", "0.0.0.0"),
        port=int(os.getenv("WORLDBRIDGE_PORT", "8000")),
        log_level=os.getenv("WORLDBRIDGE_LOG_LEVEL", "INFO").upper(),
    )
