"""Step Functions client for starting and inspecting workflow executions."""

from __future__ import annotations

import json
from typing import Any

import boto3
from botocore.exceptions import ClientError

from stepflow.core.config import StateMachineConfig
from stepflow.core.exceptions import StepflowError
from stepflow.core.logging import get_logger
from stepflow.models.workflow import WorkflowInput


class StepFunctionsClient:
    """Thin boto3 wrapper around the workflow state machine."""

    def __init__(
        self,
        config: StateMachineConfig | None = None,
        *,
        region: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self._config = config or StateMachineConfig()
        self._region = region or self._config.region
        self._endpoint_url = endpoint_url or self._config.endpoint_url
        kwargs: dict = {"region_name": self._region}
        if self._endpoint_url:
            kwargs["endpoint_url"] = self._endpoint_url
        self._client = boto3.client("stepfunctions", **kwargs)
        self._logger = get_logger(__name__)

    def start_execution(self, state_machine_arn: str, workflow_input: WorkflowInput) -> str:
        """Start an execution named after the input's execution id; return its ARN."""
        kwargs: dict[str, Any] = {
            "stateMachineArn": state_machine_arn,
            "input": json.dumps(workflow_input.to_wire()),
        }
        if workflow_input.execution_id:
            kwargs["name"] = workflow_input.execution_id
        try:
            resp = self._client.start_execution(**kwargs)
        except ClientError as exc:
            raise StepflowError(
                f"StartExecution failed for {state_machine_arn!r}: {exc}"
            ) from exc

        self._logger.info(
            "Started state machine execution",
            extra={
                "event": "execution_started",
                "metadata": {
                    "execution_id": workflow_input.execution_id,
                    "execution_arn": resp["executionArn"],
                },
            },
        )
        return resp["executionArn"]

    def describe_execution(self, execution_arn: str) -> dict[str, Any]:
        """Return status, input and (when finished) output of an execution."""
        try:
            resp = self._client.describe_execution(executionArn=execution_arn)
        except ClientError as exc:
            raise StepflowError(f"DescribeExecution failed for {execution_arn!r}: {exc}") from exc

        out: dict[str, Any] = {
            "executionArn": resp["executionArn"],
            "status": resp["status"],
            "input": json.loads(resp["input"]) if resp.get("input") else None,
        }
        if resp.get("output"):
            out["output"] = json.loads(resp["output"])
        return out
