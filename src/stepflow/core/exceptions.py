"""stepflow exception hierarchy."""

from __future__ import annotations


class StepflowError(Exception):
    """Base exception for all stepflow errors."""


class InputValidationError(StepflowError):
    """Inbound event could not be decoded into a WorkflowInput."""


class WorkflowError(StepflowError):
    """Error during workflow execution."""


class StepFailedError(WorkflowError):
    """A workflow step reported failure."""

    def __init__(self, step_name: str, message: str | None) -> None:
        self.step_name = step_name
        self.step_error = message
        super().__init__(f"Step {step_name} failed: {message}")


def error_message(error: BaseException | None, default: str = "Unknown error") -> str:
    """Return a human-readable message for ``error``, falling back to ``default``."""
    if error is None:
        return default
    return str(error) or default
