"""Amazon States Language definition for the workflow state machine.

The machine is a single Lambda task followed by a choice on ``$.success``;
``route_output`` applies the same rule to an in-process ``WorkflowOutput``.
"""

from __future__ import annotations

import json
from typing import Any

from stepflow.core.config import StateMachineConfig
from stepflow.models.workflow import WorkflowOutput

START_STATE = "StartWorkflow"
CHOICE_STATE = "CheckWorkflowResult"
SUCCEEDED_STATE = "WorkflowSucceeded"
FAILED_STATE = "WorkflowFailed"

LAMBDA_SERVICE_ERRORS = [
    "Lambda.ClientExecutionTimeoutException",
    "Lambda.ServiceException",
    "Lambda.AWSLambdaException",
    "Lambda.SdkClientException",
]


def build_state_machine_definition(
    function_arn: str, config: StateMachineConfig | None = None
) -> dict[str, Any]:
    """Return the ASL document routing the workflow Lambda to a terminal state."""
    config = config or StateMachineConfig()
    return {
        "Comment": f"{config.name}: scheduled data migration workflow",
        "StartAt": START_STATE,
        "TimeoutSeconds": config.timeout,
        "States": {
            START_STATE: {
                "Type": "Task",
                "Resource": "arn:aws:states:::lambda:invoke",
                "Parameters": {"FunctionName": function_arn, "Payload.$": "$"},
                "OutputPath": "$.Payload",
                "Retry": [
                    {
                        "ErrorEquals": LAMBDA_SERVICE_ERRORS,
                        "IntervalSeconds": 2,
                        "MaxAttempts": config.retry_attempts,
                        "BackoffRate": 2,
                    }
                ],
                "Catch": [
                    {
                        "ErrorEquals": ["States.ALL"],
                        "ResultPath": "$.error",
                        "Next": FAILED_STATE,
                    }
                ],
                "Next": CHOICE_STATE,
            },
            CHOICE_STATE: {
                "Type": "Choice",
                "Choices": [
                    {
                        "Variable": "$.success",
                        "BooleanEquals": True,
                        "Next": SUCCEEDED_STATE,
                    }
                ],
                "Default": FAILED_STATE,
            },
            SUCCEEDED_STATE: {
                "Type": "Succeed",
                "Comment": "Workflow completed successfully",
            },
            FAILED_STATE: {
                "Type": "Fail",
                "Error": "WorkflowError",
                "Cause": "Workflow execution failed",
            },
        },
    }


def render_state_machine_definition(
    function_arn: str, config: StateMachineConfig | None = None
) -> str:
    """Serialise the ASL document for ``create_state_machine``."""
    return json.dumps(build_state_machine_definition(function_arn, config), indent=2)


def route_output(output: WorkflowOutput) -> str:
    """Terminal state the state machine would enter for ``output``."""
    return SUCCEEDED_STATE if output.success is True else FAILED_STATE
