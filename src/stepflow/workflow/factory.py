"""WorkflowFactory — fixed assembly of the data migration workflow."""

from __future__ import annotations

import logging

from stepflow.core.config import WorkflowConfig
from stepflow.models.workflow import DEFAULT_STATE_MACHINE_NAME
from stepflow.workflow.error_handler import DefaultErrorHandler
from stepflow.workflow.orchestrator import WorkflowOrchestrator
from stepflow.workflow.steps import DataProcessingStep, ValidationStep


class WorkflowFactory:
    """Builds preconfigured orchestrators."""

    @staticmethod
    def create_data_migration_workflow(
        *,
        config: WorkflowConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> WorkflowOrchestrator:
        """Return ``[ValidationStep, DataProcessingStep]`` with the default error handler.

        Called without arguments this is pure construction with no simulated
        delay; pass ``config`` to pick up the configured delay and name.
        """
        if config is None:
            delay, name = 0.0, DEFAULT_STATE_MACHINE_NAME
        else:
            delay, name = config.processing_delay_seconds, config.state_machine_name

        steps = [
            ValidationStep(logger=logger),
            DataProcessingStep(delay_seconds=delay, logger=logger),
        ]
        return WorkflowOrchestrator(
            steps,
            DefaultErrorHandler(logger=logger),
            state_machine_name=name,
            logger=logger,
        )
