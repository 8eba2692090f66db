"""Workflow input, context, step and output models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

DEFAULT_STATE_MACHINE_NAME = "DataMigrationWorkflow"


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _WireModel(BaseModel):
    """Immutable model serialised with camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump with camelCase keys, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class WorkflowInput(_WireModel):
    """Input record supplied by the trigger or a direct caller.

    ``execution_id`` is deliberately permissive here; the strict
    non-empty check happens in ``parse_workflow_input`` at the process
    boundary and again in ``ValidationStep``.
    """

    execution_id: str = ""
    timestamp: str = ""
    data: Optional[dict[str, Any]] = None


class ExecutionContext(_WireModel):
    """Read-only bundle passed to every step of one invocation."""

    execution_id: str
    state_machine_name: str = DEFAULT_STATE_MACHINE_NAME
    input: WorkflowInput


class StepResult(_WireModel):
    """Outcome of a single step."""

    step_name: str
    success: bool
    output: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "StepResult":
        if self.success:
            if self.output is None or self.error is not None:
                raise ValueError("successful step result requires output and no error")
        elif self.error is None or self.output is not None:
            raise ValueError("failed step result requires error and no output")
        return self

    @classmethod
    def ok(cls, step_name: str, output: dict[str, Any]) -> "StepResult":
        return cls(step_name=step_name, success=True, output=output)

    @classmethod
    def failed(cls, step_name: str, error: str) -> "StepResult":
        return cls(step_name=step_name, success=False, error=error)


class WorkflowOutput(_WireModel):
    """The orchestrator's sole return value, inspected by the router."""

    success: bool
    execution_id: str
    timestamp: str = Field(default_factory=utc_now_iso)
    result: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "WorkflowOutput":
        if self.success:
            if self.result is None or self.error is not None:
                raise ValueError("successful workflow output requires result and no error")
        elif self.error is None or self.result is not None:
            raise ValueError("failed workflow output requires error and no result")
        return self


class ScheduledEvent(BaseModel):
    """EventBridge scheduled event (the fields the trigger reads)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    source: str = "aws.events"
    time: str = ""
    detail_type: str = Field(default="Scheduled Event", alias="detail-type")
    resources: list[str] = Field(default_factory=list)
    detail: dict[str, Any] = Field(default_factory=dict)
