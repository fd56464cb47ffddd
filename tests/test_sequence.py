import asyncio

import pytest

from worldbridge.models.protocol import SequenceStep
from worldbridge.tools import results
from worldbridge.tools.sequence import SequenceOrchestrator


def run_sequence(tool, steps):
    return asyncio.run(tool.execute({"action": "sequence", "steps": steps}))


def test_failed_step_does_not_stop_sequence(world_tool, world):
    outcome = run_sequence(world_tool, [
        {"type": "set_time", "time": 1000},
        {"type": "build", "x1": 0},
        {"type": "send_message", "message": "done"},
    ])

    assert not outcome.success
    assert outcome.data["total"] == 3
    assert outcome.data["succeeded"] == 2
    assert outcome.data["failed"] == 1

    first, second, third = outcome.data["results"]
    assert (first["index"], first["success"]) == (0, True)
    assert (second["index"], second["step"], second["success"]) == (1, "build", False)
    assert second["message"].startswith("Unknown action: build")
    assert (third["index"], third["success"]) == (2, True)

    assert world.calls == [("set_time_of_day", 1000), ("send_message", "done", None)]
    assert "failed steps: 2" in outcome.message


def test_all_steps_succeed(world_tool):
    outcome = run_sequence(world_tool, [
        {"type": "set_weather", "weather": "clear"},
        {"type": "get_weather"},
    ])

    assert outcome.success
    assert outcome.message == "Sequence completed: 2/2 steps succeeded"


def test_wait_steps_use_given_and_default_delay(world_tool, sleeper):
    outcome = run_sequence(world_tool, [
        {"type": "wait", "waitMs": 500},
        {"type": "wait"},
        {"type": "wait", "wait_ms": -20},
    ])

    assert outcome.success
    assert sleeper.delays == [pytest.approx(0.5), pytest.approx(1.0), 0]
    assert [r["description"] for r in outcome.data["results"]] == ["wait 500ms", "wait", "wait -20ms"]


def test_step_description_and_forwarded_fields(world_tool, world):
    outcome = run_sequence(world_tool, [
        {"type": "run_command", "command": "time add 100", "description": "skip ahead"},
    ])

    assert outcome.data["results"][0]["description"] == "skip ahead"
    assert world.commands == ["time add 100"]


def test_empty_sequence_succeeds(world_tool):
    outcome = run_sequence(world_tool, [])

    assert outcome.success
    assert outcome.data["results"] == []


def test_missing_steps_is_rejected(world_tool):
    outcome = asyncio.run(world_tool.execute({"action": "sequence"}))

    assert not outcome.success
    assert outcome.message == "steps array is required for sequence action"


def test_step_without_type_is_rejected(world_tool, world):
    outcome = run_sequence(world_tool, [{"time": 100}])

    assert not outcome.success
    assert outcome.message.startswith("Invalid parameters for sequence")
    assert world.calls == []


@pytest.mark.parametrize("wait_ms", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_wait_is_rejected(world_tool, world, sleeper, wait_ms):
    outcome = run_sequence(world_tool, [
        {"type": "set_time", "time": 1000},
        {"type": "wait", "waitMs": wait_ms},
    ])

    assert not outcome.success
    assert outcome.message.startswith("Invalid parameters for sequence")
    assert "waitMs" in outcome.message
    assert sleeper.delays == []
    assert world.calls == []


def test_orchestrator_records_raising_step(sleeper):
    calls = []

    async def run_action(params):
        calls.append(params)
        if params["action"] == "explode":
            raise RuntimeError("boom")
        return results.success("ok")

    orchestrator = SequenceOrchestrator(run_action, sleep=sleeper)
    outcome = asyncio.run(orchestrator.run([
        SequenceStep(type="explode"),
        SequenceStep(type="noop", value=3),
    ]))

    assert not outcome.success
    assert outcome.data["results"][0]["message"] == "Step 1 (explode) error: boom"
    assert outcome.data["results"][1]["success"] is True
    assert calls == [{"action": "explode"}, {"action": "noop", "value": 3}]


def test_steps_run_in_order_one_at_a_time(sleeper):
    order = []

    async def run_action(params):
        order.append(("start", params["n"]))
        await asyncio.sleep(0)
        order.append(("end", params["n"]))
        return results.success("ok")

    orchestrator = SequenceOrchestrator(run_action, sleep=sleeper)
    asyncio.run(orchestrator.run([SequenceStep(type="step", n=i) for i in range(3)]))

    assert order == [
        ("start", 0), ("end", 0),
        ("start", 1), ("end", 1),
        ("start", 2), ("end", 2),
    ]
