"""Tests for WorkflowOrchestrator ordering, short-circuit and aggregation."""

from __future__ import annotations

import asyncio

import pytest

from stepflow.core.exceptions import StepFailedError
from stepflow.models.workflow import WorkflowInput
from stepflow.workflow.error_handler import DefaultErrorHandler
from stepflow.workflow.orchestrator import WorkflowOrchestrator
from stepflow.workflow.steps import DataProcessingStep, ValidationStep
from tests.fakes import FailingStep, RaisingStep, RecordingErrorHandler, RecordingStep


def _input(execution_id: str = "exec-1", data: dict | None = None) -> WorkflowInput:
    return WorkflowInput(execution_id=execution_id, timestamp="2025-01-01T00:00:00Z", data=data)


def _orchestrator(*steps, handler=None) -> WorkflowOrchestrator:
    return WorkflowOrchestrator(list(steps), handler or DefaultErrorHandler())


@pytest.mark.asyncio
async def test_all_steps_succeed_aggregates_outputs():
    first = RecordingStep("First", {"a": 1})
    second = RecordingStep("Second", {"b": 2})
    out = await _orchestrator(first, second).execute(_input())

    assert out.success is True
    assert out.error is None
    assert out.result == {"First": {"a": 1}, "Second": {"b": 2}}
    assert first.call_count == second.call_count == 1


@pytest.mark.asyncio
async def test_execution_id_is_preserved():
    out = await _orchestrator(RecordingStep("Only")).execute(_input("abc-42"))
    assert out.execution_id == "abc-42"


@pytest.mark.asyncio
async def test_steps_share_one_context_per_run():
    first, second = RecordingStep("First"), RecordingStep("Second")
    await _orchestrator(first, second).execute(_input())
    assert first.calls[0] is second.calls[0]
    assert first.calls[0].state_machine_name == "DataMigrationWorkflow"


@pytest.mark.asyncio
async def test_failure_short_circuits_later_steps():
    failing = FailingStep("Validation", "Missing execution ID")
    later = RecordingStep("DataProcessing")
    handler = RecordingErrorHandler(DefaultErrorHandler())
    out = await _orchestrator(failing, later, handler=handler).execute(_input())

    assert out.success is False
    assert out.result is None
    assert out.error == "Step Validation failed: Missing execution ID"
    assert later.call_count == 0
    [error] = handler.errors
    assert isinstance(error, StepFailedError)
    assert error.step_name == "Validation"


@pytest.mark.asyncio
async def test_empty_execution_id_fails_in_validation():
    processing = RecordingStep("DataProcessing")
    out = await _orchestrator(ValidationStep(), processing).execute(_input(""))

    assert out.success is False
    assert out.execution_id == ""
    assert "Validation" in out.error
    assert processing.call_count == 0


@pytest.mark.asyncio
async def test_raising_step_without_message_reports_unknown_error():
    out = await _orchestrator(RaisingStep("Broken")).execute(_input())
    assert out.success is False
    assert out.error == "Unknown error"


@pytest.mark.asyncio
async def test_raising_step_message_is_passed_through():
    after = RecordingStep("After")
    out = await _orchestrator(RaisingStep("Broken", ValueError("kaput")), after).execute(_input())
    assert out.error == "kaput"
    assert after.call_count == 0


@pytest.mark.asyncio
async def test_concrete_data_migration_scenario():
    orchestrator = _orchestrator(ValidationStep(), DataProcessingStep())
    out = await orchestrator.execute(_input("exec-1", {"x": 1}))

    assert out.success is True
    assert out.execution_id == "exec-1"
    assert out.result["Validation"] == {"validated": True}
    assert out.result["DataProcessing"]["processed"] is True
    assert out.result["DataProcessing"]["inputData"] == {"x": 1}


@pytest.mark.asyncio
async def test_concurrent_runs_are_independent():
    orchestrator = _orchestrator(ValidationStep(), DataProcessingStep(delay_seconds=0.01))
    ids = [f"exec-{i}" for i in range(5)] + [""]
    outputs = await asyncio.gather(*(orchestrator.execute(_input(i)) for i in ids))

    assert [o.execution_id for o in outputs] == ids
    assert [o.success for o in outputs] == [True] * 5 + [False]


@pytest.mark.asyncio
async def test_no_steps_is_trivial_success():
    out = await _orchestrator().execute(_input())
    assert out.success is True
    assert out.result == {}
