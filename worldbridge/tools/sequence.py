# worldbridge/tools/sequence.py
"""
SequenceOrchestrator - runs an ordered list of steps one at a time.

Steps are either explicit waits or actions delegated to the tool that owns the
sequence. Every step runs exactly once, in list order; a failing step is
recorded and the loop moves on to the next one.
"""

from typing import Any, Awaitable, Callable, Dict, List
import asyncio
import logging

from worldbridge.models.base import ExecutionOutcome, StepOutcome
from worldbridge.models.protocol import SequenceStep
from worldbridge.tools import results
from worldbridge.tools.config import DEFAULT_WAIT_MS

logger = logging.getLogger(__name__)

ActionRunner = Callable[[Dict[str, Any]], Awaitable[ExecutionOutcome]]
Sleeper = Callable[[float], Awaitable[Any]]


class SequenceOrchestrator:
    """顺序执行器 - executes sequence steps through the owning tool's single-action entry point"""

    def __init__(self, run_action: ActionRunner, sleep: Sleeper = asyncio.sleep, default_wait_ms: float = DEFAULT_WAIT_MS):
        self.run_action = run_action
        self.sleep = sleep
        self.default_wait_ms = default_wait_ms

    async def run(self, steps: List[SequenceStep]) -> ExecutionOutcome:
        """Execute every step in order and aggregate the outcomes"""
        logger.info(f"Starting sequence with {len(steps)} steps")

        records: List[StepOutcome] = []
        all_succeeded = True
        for index, step in enumerate(steps):
            outcome = await self._run_step(step, index)
            records.append(
                StepOutcome(
                    index=index,
                    step=step.type,
                    description=step.describe(),
                    **outcome.model_dump(),
                )
            )
            all_succeeded = all_succeeded and outcome.success
            if not outcome.success:
                logger.warning(f"Sequence step {index + 1}/{len(steps)} ({step.type}) failed: {outcome.message}")

        return results.summarize_sequence(records, all_succeeded)

    async def _run_step(self, step: SequenceStep, index: int) -> ExecutionOutcome:
        if step.is_wait():
            return await self._wait(step)

        logger.info(f"Sequence step {index + 1}: {step.type}")
        try:
            return await self.run_action(step.action_params())
        except Exception as e:
            logger.error(f"Sequence step {index + 1} raised: {str(e)}", exc_info=True)
            return results.from_exception(f"Step {index + 1} ({step.type}) error", e)

    async def _wait(self, step: SequenceStep) -> ExecutionOutcome:
        wait_ms = self.default_wait_ms if step.wait_ms is None else max(step.wait_ms, 0)
        await self.sleep(wait_ms / 1000)
        return results.success(f"Waited {wait_ms:g}ms", {"wait_ms": wait_ms})
