"""AWS adapters: state machine definition, Step Functions client, schedule."""

from __future__ import annotations

from stepflow.aws.schedule import ScheduleRegistrar, build_target_input_transformer
from stepflow.aws.state_machine import build_state_machine_definition, route_output
from stepflow.aws.step_functions import StepFunctionsClient

__all__ = [
    "ScheduleRegistrar",
    "StepFunctionsClient",
    "build_state_machine_definition",
    "build_target_input_transformer",
    "route_output",
]
