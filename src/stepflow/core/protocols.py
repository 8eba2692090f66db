"""Protocol interfaces for the workflow core.

Structural typing, no inheritance required: anything with a matching
``execute``/``handle`` coroutine can be plugged into the orchestrator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stepflow.models.workflow import (
        ExecutionContext,
        StepResult,
        WorkflowInput,
        WorkflowOutput,
    )


# ---------------------------------------------------------------------------
# Workflow
# ---------------------------------------------------------------------------

@runtime_checkable
class IWorkflowProcessor(Protocol):
    """Runs one workflow invocation end to end."""

    async def execute(self, workflow_input: WorkflowInput) -> WorkflowOutput: ...


@runtime_checkable
class IStepExecutor(Protocol):
    """A single named unit of work in the pipeline."""

    name: str

    async def execute(self, context: ExecutionContext) -> StepResult: ...


@runtime_checkable
class IErrorHandler(Protocol):
    """Converts a failure into the terminal failure output."""

    async def handle(self, error: BaseException, context: ExecutionContext) -> WorkflowOutput: ...
