"""Run the data migration workflow once and print its output.

Runs in-process by default; with ``--state-machine-arn`` the input is handed
to Step Functions instead and the execution ARN is printed.

Usage:
    python scripts/run_workflow.py --execution-id manual-1 --data '{"x": 1}'
    python scripts/run_workflow.py --state-machine-arn arn:aws:states:...:stateMachine:DataMigrationWorkflow
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
import uuid
from typing import Any

from stepflow.aws.state_machine import route_output
from stepflow.aws.step_functions import StepFunctionsClient
from stepflow.core.config import AppSettings
from stepflow.core.logging import configure_logging
from stepflow.models.workflow import WorkflowInput, utc_now_iso
from stepflow.workflow.factory import WorkflowFactory


def parse_data(raw: str | None) -> dict[str, Any]:
    """Decode ``--data``; raises ValueError unless it is a JSON object."""
    if not raw:
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("--data must be a JSON object")
    return data


def build_input(execution_id: str | None, data: dict[str, Any] | None) -> WorkflowInput:
    """Build a manual-trigger input; a fresh UUID is used when no id is given."""
    payload: dict[str, Any] = {"triggerSource": "Manual"}
    payload.update(data or {})
    return WorkflowInput(
        execution_id=str(uuid.uuid4()) if execution_id is None else execution_id,
        timestamp=utc_now_iso(),
        data=payload,
    )


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, execute the workflow, print the output; 0 on success."""
    parser = argparse.ArgumentParser(description="Run the data migration workflow once")
    parser.add_argument("--execution-id", default=None, help="Execution id (default: random UUID)")
    parser.add_argument("--data", default=None, help="JSON object merged into the input data")
    parser.add_argument(
        "--state-machine-arn",
        default=None,
        help="Start the execution on this Step Functions state machine instead of in-process",
    )
    args = parser.parse_args(argv)

    try:
        data = parse_data(args.data)
    except ValueError as exc:  # json.JSONDecodeError is a ValueError
        parser.error(f"invalid --data: {exc}")

    settings = AppSettings()
    configure_logging(settings.log_level)
    workflow_input = build_input(args.execution_id, data)

    if args.state_machine_arn:
        client = StepFunctionsClient(settings.state_machine)
        execution_arn = client.start_execution(args.state_machine_arn, workflow_input)
        print(json.dumps({"executionArn": execution_arn, "input": workflow_input.to_wire()}, indent=2))
        return 0

    orchestrator = WorkflowFactory.create_data_migration_workflow(config=settings.workflow)
    output = asyncio.run(orchestrator.execute(workflow_input))

    body = output.to_wire()
    body["terminalState"] = route_output(output)
    print(json.dumps(body, indent=2))
    return 0 if output.success else 1


if __name__ == "__main__":
    sys.exit(run())
