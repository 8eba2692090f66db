"""EventBridge schedule that starts the workflow state machine."""

from __future__ import annotations

import json
from typing import Any

import boto3
from botocore.exceptions import ClientError

from stepflow.core.config import ScheduleConfig
from stepflow.core.exceptions import StepflowError
from stepflow.core.logging import get_logger

TARGET_ID = "WorkflowStateMachine"


def build_target_input_transformer(rule_name: str) -> dict[str, Any]:
    """Map the scheduled event onto a ``WorkflowInput`` document.

    ``$.id`` becomes the execution id and ``$.time`` the timestamp.
    """
    template = json.dumps(
        {
            "executionId": "<id>",
            "timestamp": "<time>",
            "data": {"triggerSource": "EventBridge", "ruleName": rule_name},
        }
    )
    # Placeholders are quoted so EventBridge substitutes them as JSON strings
    return {
        "InputPathsMap": {"id": "$.id", "time": "$.time"},
        "InputTemplate": template,
    }


class ScheduleRegistrar:
    """Registers the periodic rule and its Step Functions target."""

    def __init__(
        self,
        config: ScheduleConfig | None = None,
        *,
        region: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self._config = config or ScheduleConfig()
        kwargs: dict = {"region_name": region or self._config.region}
        endpoint_url = endpoint_url or self._config.endpoint_url
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("events", **kwargs)
        self._logger = get_logger(__name__)

    def register(self, state_machine_arn: str, role_arn: str) -> str:
        """Create or update the rule and point it at the state machine; return the rule ARN."""
        cfg = self._config
        try:
            rule = self._client.put_rule(
                Name=cfg.rule_name,
                ScheduleExpression=cfg.schedule_expression,
                Description=cfg.description,
                State="ENABLED",
            )
            self._client.put_targets(
                Rule=cfg.rule_name,
                Targets=[
                    {
                        "Id": TARGET_ID,
                        "Arn": state_machine_arn,
                        "RoleArn": role_arn,
                        "InputTransformer": build_target_input_transformer(cfg.rule_name),
                    }
                ],
            )
        except ClientError as exc:
            raise StepflowError(f"Schedule registration failed for {cfg.rule_name!r}: {exc}") from exc

        self._logger.info(
            "Registered workflow schedule",
            extra={
                "event": "schedule_registered",
                "metadata": {
                    "rule_name": cfg.rule_name,
                    "schedule_expression": cfg.schedule_expression,
                    "state_machine_arn": state_machine_arn,
                },
            },
        )
        return rule["RuleArn"]
