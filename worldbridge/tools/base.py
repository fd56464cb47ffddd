# worldbridge/tools/base.py
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar
import asyncio
import logging

from pydantic import BaseModel, ValidationError

from worldbridge.models.base import ExecutionOutcome
from worldbridge.models.protocol import SequenceParams
from worldbridge.tools import results
from worldbridge.tools.config import DEFAULT_WAIT_MS
from worldbridge.tools.errors import (
    UnknownActionError, WorldUnavailableError, WorldValidationError,
    describe_validation_error,
)
from worldbridge.tools.gateway.base import WorldGateway, WorldSession
from worldbridge.tools.sequence import SequenceOrchestrator, Sleeper

logger = logging.getLogger(__name__)

Handler = Callable[[WorldGateway, Dict[str, Any]], Awaitable[ExecutionOutcome]]
ParamsT = TypeVar("ParamsT", bound=BaseModel)


class BaseTool(ABC):
    """工具基类 - one named tool with a closed action vocabulary.

    Subclasses declare their action enum and map every member to a handler in
    build_handlers(). Handlers receive the connected gateway and the raw call
    arguments. The mapping is checked when the tool is constructed, so
    an action without a handler is a startup error rather than a runtime
    fallthrough.

    Attributes:
        name (str): Tool name exposed to the client
        description (str): One-line description exposed to the client
        input_model (Type[BaseModel]): Model published as the tool's input schema
        action_type (Type[Enum]): Closed action vocabulary
        default_action (Optional[str]): Action used when the call omits one
        error_prefix (str): Prefix for failures raised by the world gateway
    """
    name: str
    description: str
    input_model: Type[BaseModel]
    action_type: Type[Enum]
    default_action: Optional[str] = None
    error_prefix: str = "Tool error"

    def __init__(self, session: WorldSession, sleep: Sleeper = asyncio.sleep, default_wait_ms: float = DEFAULT_WAIT_MS):
        self.session = session
        self.orchestrator = SequenceOrchestrator(self.execute, sleep=sleep, default_wait_ms=default_wait_ms)
        self._handlers: Dict[Enum, Handler] = self.build_handlers()

        missing = [action.value for action in self.action_type if action not in self._handlers]
        if missing:
            raise TypeError(f"{type(self).__name__} has no handler for actions: {', '.join(missing)}")

    @abstractmethod
    def build_handlers(self) -> Dict[Enum, Handler]:
        """Map every member of action_type to its handler"""
        pass

    def parse_action(self, raw: Optional[str]) -> Enum:
        if raw is None or raw == "":
            raw = self.default_action
        if raw is None:
            raise WorldValidationError(f"action is required for {self.name}")
        try:
            return self.action_type(raw)
        except ValueError:
            raise UnknownActionError(str(raw), [action.value for action in self.action_type])

    @staticmethod
    def parse_params(action: str, model: Type[ParamsT], args: Dict[str, Any]) -> ParamsT:
        """Validate the call arguments of one action against its parameter model"""
        try:
            return model.model_validate(args)
        except ValidationError as e:
            raise WorldValidationError(describe_validation_error(action, e))

    async def execute(self, args: Dict[str, Any]) -> ExecutionOutcome:
        """Single-action entry point: `{action, ...fields}` -> ExecutionOutcome

        Never raises; every failure becomes an outcome with success=False.
        """
        try:
            world = self.session.world
        except WorldUnavailableError as e:
            logger.warning(f"{self.name} called without a world: {str(e)}")
            return results.failure(str(e))

        try:
            action = self.parse_action(args.get("action"))
            logger.info(f"Executing {self.name}.{action.value}")
            return await self._handlers[action](world, args)
        except (WorldValidationError, WorldUnavailableError) as e:
            logger.warning(f"{self.name} rejected call: {str(e)}")
            return results.failure(str(e))
        except Exception as e:
            logger.error(f"Error in {self.name}: {str(e)}", exc_info=True)
            return results.from_exception(self.error_prefix, e)

    async def run_sequence(self, world: WorldGateway, args: Dict[str, Any]) -> ExecutionOutcome:
        """sequence action shared by every tool"""
        if args.get("steps") is None:
            raise WorldValidationError("steps array is required for sequence action")
        params = self.parse_params("sequence", SequenceParams, args)
        return await self.orchestrator.run(params.steps)
