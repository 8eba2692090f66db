"""Shared test doubles — steps with controllable behaviour and a Lambda context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stepflow.models.workflow import ExecutionContext, StepResult


class RecordingStep:
    """Step that succeeds with a fixed output and records every context it sees."""

    def __init__(self, name: str, output: dict[str, Any] | None = None) -> None:
        self.name = name
        self.output = output if output is not None else {"ran": name}
        self.calls: list[ExecutionContext] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def execute(self, context: ExecutionContext) -> StepResult:
        self.calls.append(context)
        return StepResult.ok(self.name, self.output)


class FailingStep(RecordingStep):
    """Step that reports failure without raising."""

    def __init__(self, name: str, error: str = "boom") -> None:
        super().__init__(name)
        self.error = error

    async def execute(self, context: ExecutionContext) -> StepResult:
        self.calls.append(context)
        return StepResult.failed(self.name, self.error)


class RaisingStep(RecordingStep):
    """Step that violates the no-raise contract."""

    def __init__(self, name: str, exc: BaseException | None = None) -> None:
        super().__init__(name)
        self.exc = exc if exc is not None else RuntimeError()

    async def execute(self, context: ExecutionContext) -> StepResult:
        self.calls.append(context)
        raise self.exc


class RecordingErrorHandler:
    """Wraps the default handler and keeps the errors it was given."""

    def __init__(self, inner: Any) -> None:
        self._inner = inner
        self.errors: list[BaseException] = []

    async def handle(self, error: BaseException, context: ExecutionContext):
        self.errors.append(error)
        return await self._inner.handle(error, context)


@dataclass
class FakeLambdaContext:
    aws_request_id: str = "req-123"
    function_name: str = "WorkflowLambda"


__all__ = [
    "FailingStep",
    "FakeLambdaContext",
    "RaisingStep",
    "RecordingErrorHandler",
    "RecordingStep",
]
