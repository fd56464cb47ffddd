# worldbridge/tools/results.py
from typing import Any, Dict, List, Optional

from worldbridge.models.base import ExecutionOutcome, StepOutcome


def success(message: str, data: Optional[Dict[str, Any]] = None) -> ExecutionOutcome:
    return ExecutionOutcome(success=True, message=message, data=data)


def failure(message: str, data: Optional[Dict[str, Any]] = None) -> ExecutionOutcome:
    return ExecutionOutcome(success=False, message=message, data=data)


def from_exception(prefix: str, error: BaseException) -> ExecutionOutcome:
    """Failed outcome carrying the underlying error message verbatim"""
    detail = str(error) or error.__class__.__name__
    return failure(f"{prefix}: {detail}")


def summarize_sequence(results: List[StepOutcome], all_succeeded: bool) -> ExecutionOutcome:
    """Fold per-step records into the aggregated sequence outcome

    Args:
        results: Step records in execution order
        all_succeeded: Running success flag accumulated while the steps ran

    Returns:
        ExecutionOutcome whose data carries the ordered step records and counts
    """
    total = len(results)
    succeeded = sum(1 for r in results if r.success)
    failed = total - succeeded

    if failed:
        failed_steps = ", ".join(str(r.index + 1) for r in results if not r.success)
        message = f"Sequence completed with errors: {succeeded}/{total} steps succeeded, {failed} failed (failed steps: {failed_steps})"
    else:
        message = f"Sequence completed: {succeeded}/{total} steps succeeded"

    return ExecutionOutcome(
        success=all_succeeded,
        message=message,
        data={
            "total": total,
            "succeeded": succeeded,
            "failed": failed,
            "results": [r.model_dump() for r in results],
        },
    )
