"""Default error handler — the single conversion point to the failure shape."""

from __future__ import annotations

import logging

from stepflow.core.exceptions import error_message
from stepflow.core.logging import get_logger
from stepflow.models.workflow import ExecutionContext, WorkflowOutput


class DefaultErrorHandler:
    """Logs the failure and returns a terminal failure ``WorkflowOutput``."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger(__name__)

    async def handle(self, error: BaseException | None, context: ExecutionContext) -> WorkflowOutput:
        message = error_message(error)
        output = WorkflowOutput(
            success=False,
            execution_id=context.execution_id,
            error=message,
        )
        self._logger.error(
            f"Workflow execution failed: {message}",
            extra={
                "event": "workflow_failed",
                "metadata": {
                    "execution_id": context.execution_id,
                    "state_machine": context.state_machine_name,
                    "error": message,
                    "timestamp": output.timestamp,
                },
            },
        )
        return output
