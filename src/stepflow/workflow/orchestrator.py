"""WorkflowOrchestrator — runs steps in order and aggregates their outputs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from stepflow.core.exceptions import StepFailedError
from stepflow.core.logging import get_logger
from stepflow.core.protocols import IErrorHandler, IStepExecutor
from stepflow.models.workflow import (
    DEFAULT_STATE_MACHINE_NAME,
    ExecutionContext,
    WorkflowInput,
    WorkflowOutput,
)


class WorkflowOrchestrator:
    """Linear step pipeline with short-circuit on the first failure.

    Holds no per-run state: every ``execute`` call builds its own
    ``ExecutionContext``, so concurrent invocations are independent.
    """

    def __init__(
        self,
        steps: Sequence[IStepExecutor],
        error_handler: IErrorHandler,
        *,
        state_machine_name: str = DEFAULT_STATE_MACHINE_NAME,
        logger: logging.Logger | None = None,
    ) -> None:
        self._steps = tuple(steps)
        self._error_handler = error_handler
        self._state_machine_name = state_machine_name
        self._logger = logger or get_logger(__name__)

    @property
    def steps(self) -> tuple[IStepExecutor, ...]:
        return self._steps

    @property
    def error_handler(self) -> IErrorHandler:
        return self._error_handler

    async def execute(self, workflow_input: WorkflowInput) -> WorkflowOutput:
        """Run every step in order and return the aggregated output.

        Args:
            workflow_input: Input record for this run.

        Returns:
            A success output whose ``result`` maps step names to their
            outputs, or the error handler's failure output.
        """
        context = ExecutionContext(
            execution_id=workflow_input.execution_id,
            state_machine_name=self._state_machine_name,
            input=workflow_input,
        )
        self._logger.info(
            "Starting workflow execution",
            extra={
                "event": "workflow_started",
                "metadata": {
                    "execution_id": context.execution_id,
                    "state_machine": context.state_machine_name,
                    "step_count": len(self._steps),
                },
            },
        )

        try:
            results: dict[str, Any] = {}
            for step in self._steps:
                step_result = await step.execute(context)
                if not step_result.success:
                    raise StepFailedError(step_result.step_name, step_result.error)
                results[step_result.step_name] = step_result.output
        except Exception as exc:
            return await self._error_handler.handle(exc, context)

        output = WorkflowOutput(
            success=True,
            execution_id=context.execution_id,
            result=results,
        )
        self._logger.info(
            "Workflow execution completed",
            extra={
                "event": "workflow_succeeded",
                "metadata": {"execution_id": context.execution_id, "steps": list(results)},
            },
        )
        return output
