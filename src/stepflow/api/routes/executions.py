"""Run the workflow in-process over HTTP."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from stepflow.aws.state_machine import route_output
from stepflow.core.protocols import IWorkflowProcessor
from stepflow.models.workflow import WorkflowInput

router = APIRouter(tags=["executions"])


@router.post("/executions")
async def create_execution(workflow_input: WorkflowInput, request: Request) -> dict[str, Any]:
    """Execute one workflow run and report its output and terminal state."""
    workflow: IWorkflowProcessor = request.app.state.workflow
    output = await workflow.execute(workflow_input)
    body = output.to_wire()
    body["terminalState"] = route_output(output)
    return body
