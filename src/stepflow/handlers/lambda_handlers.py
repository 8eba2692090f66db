"""AWS Lambda entry points: EventBridge trigger and workflow execution."""

from __future__ import annotations

import asyncio
from typing import Any

from stepflow.core.config import AppSettings
from stepflow.core.exceptions import InputValidationError, error_message
from stepflow.core.logging import configure_logging, get_logger
from stepflow.core.protocols import IWorkflowProcessor
from stepflow.core.types import JsonDict
from stepflow.models.workflow import ScheduledEvent, WorkflowInput, WorkflowOutput, utc_now_iso
from stepflow.workflow.factory import WorkflowFactory

logger = get_logger(__name__)


def parse_workflow_input(event: Any) -> WorkflowInput:
    """Decode a raw Lambda event into a ``WorkflowInput``.

    Raises:
        InputValidationError: if the event is not an object or lacks a
            non-empty string ``executionId`` / ``timestamp``.
    """
    if not event or not isinstance(event, dict):
        raise InputValidationError("Invalid input: must be an object")

    execution_id = event.get("executionId")
    if not execution_id or not isinstance(execution_id, str):
        raise InputValidationError("Invalid input: executionId is required and must be a string")

    timestamp = event.get("timestamp")
    if not timestamp or not isinstance(timestamp, str):
        raise InputValidationError("Invalid input: timestamp is required and must be a string")

    data = event.get("data")
    if data is not None and not isinstance(data, dict):
        raise InputValidationError("Invalid input: data must be an object when present")

    return WorkflowInput(execution_id=execution_id, timestamp=timestamp, data=data)


def _request_id(context: Any) -> str | None:
    return getattr(context, "aws_request_id", None)


async def run_workflow(workflow_input: WorkflowInput, settings: AppSettings | None = None) -> WorkflowOutput:
    """Run the data migration workflow for an already-decoded input."""
    settings = settings or AppSettings()
    workflow: IWorkflowProcessor = WorkflowFactory.create_data_migration_workflow(config=settings.workflow)
    return await workflow.execute(workflow_input)


def workflow_handler(event: Any, context: Any) -> JsonDict:
    """Lambda handler invoked by the ``StartWorkflow`` task.

    Always returns a ``WorkflowOutput`` dict so the state machine's
    ``CheckWorkflowResult`` choice can route on ``success``.
    """
    settings = AppSettings()
    configure_logging(settings.log_level)
    execution_id = event.get("executionId") if isinstance(event, dict) else None

    logger.info(
        "Starting workflow execution",
        extra={
            "event": "handler_started",
            "metadata": {"execution_id": execution_id, "request_id": _request_id(context)},
        },
    )

    try:
        workflow_input = parse_workflow_input(event)
    except InputValidationError as exc:
        message = error_message(exc)
        logger.error(
            "Workflow execution failed",
            extra={
                "event": "handler_failed",
                "metadata": {
                    "execution_id": execution_id,
                    "error": message,
                    "request_id": _request_id(context),
                },
            },
        )
        return WorkflowOutput(
            success=False,
            execution_id=execution_id if isinstance(execution_id, str) else "",
            error=message,
        ).to_wire()

    output = asyncio.run(run_workflow(workflow_input, settings))

    logger.info(
        "Workflow execution completed",
        extra={
            "event": "handler_completed",
            "metadata": {
                "execution_id": output.execution_id,
                "success": output.success,
                "request_id": _request_id(context),
            },
        },
    )
    return output.to_wire()


def trigger_handler(event: Any, context: Any) -> JsonDict:
    """Lambda handler for the EventBridge schedule; builds the workflow input."""
    try:
        logger.info(
            "EventBridge trigger received",
            extra={
                "event": "trigger_received",
                "metadata": {"event": event, "request_id": _request_id(context)},
            },
        )
        scheduled = ScheduledEvent.model_validate(event)
        workflow_input = WorkflowInput(
            execution_id=context.aws_request_id,
            timestamp=utc_now_iso(),
            data={
                "triggerSource": "EventBridge",
                "scheduledTime": scheduled.time or None,
            },
        )
        return workflow_input.to_wire()
    except Exception as exc:
        logger.error(
            "Trigger handler failed",
            extra={
                "event": "trigger_failed",
                "metadata": {"error": error_message(exc), "request_id": _request_id(context)},
            },
        )
        raise
