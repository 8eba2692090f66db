"""In-process workflow core: steps, error handler, orchestrator, factory."""

from __future__ import annotations

from stepflow.workflow.error_handler import DefaultErrorHandler
from stepflow.workflow.factory import WorkflowFactory
from stepflow.workflow.orchestrator import WorkflowOrchestrator
from stepflow.workflow.steps import DataProcessingStep, ValidationStep, WorkflowStep

__all__ = [
    "DataProcessingStep",
    "DefaultErrorHandler",
    "ValidationStep",
    "WorkflowFactory",
    "WorkflowOrchestrator",
    "WorkflowStep",
]
