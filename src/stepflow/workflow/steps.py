"""Workflow steps: the validation and data-processing units of work."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

from stepflow.core.exceptions import error_message
from stepflow.core.logging import get_logger
from stepflow.models.workflow import ExecutionContext, StepResult, utc_now_iso


class WorkflowStep(ABC):
    """Base step that enforces the no-raise contract.

    Subclasses implement ``run`` and may raise freely; ``execute`` turns any
    exception into a failed ``StepResult`` tagged with the step's name.
    """

    name: str = ""
    fallback_error: str = "Unknown error"

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger(__name__)

    async def execute(self, context: ExecutionContext) -> StepResult:
        try:
            return StepResult.ok(self.name, await self.run(context))
        except Exception as exc:
            message = error_message(exc, self.fallback_error)
            self._logger.warning(
                f"Step {self.name} failed: {message}",
                extra={
                    "event": "step_failed",
                    "metadata": {"execution_id": context.execution_id, "step": self.name},
                },
            )
            return StepResult.failed(self.name, message)

    @abstractmethod
    async def run(self, context: ExecutionContext) -> dict[str, Any]:
        """Do the step's work and return its output payload."""


class ValidationStep(WorkflowStep):
    """Re-checks the execution id before any processing happens."""

    name = "Validation"
    fallback_error = "Validation failed"

    async def run(self, context: ExecutionContext) -> dict[str, Any]:
        if not context.input.execution_id:
            raise ValueError("Missing execution ID")
        return {"validated": True}


class DataProcessingStep(WorkflowStep):
    """Simulated processing: waits ``delay_seconds`` then echoes the input data."""

    name = "DataProcessing"

    def __init__(self, *, delay_seconds: float = 0.0, logger: logging.Logger | None = None) -> None:
        super().__init__(logger=logger)
        self._delay_seconds = delay_seconds

    async def run(self, context: ExecutionContext) -> dict[str, Any]:
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)

        trigger_source = (context.input.data or {}).get("triggerSource")
        self._logger.info(
            "Processing workflow data",
            extra={
                "event": "data_processing",
                "metadata": {
                    "execution_id": context.execution_id,
                    "trigger_source": trigger_source,
                },
            },
        )
        return {
            "processed": True,
            "timestamp": utc_now_iso(),
            "inputData": context.input.data,
        }
