"""Register the EventBridge schedule that starts the workflow state machine.

Usage:
    python scripts/register_schedule.py \
        --state-machine-arn arn:aws:states:us-east-1:123456789012:stateMachine:DataMigrationWorkflow \
        --role-arn arn:aws:iam::123456789012:role/EventsInvokeStepFunctions
"""

from __future__ import annotations

import argparse
import sys

from stepflow.aws.schedule import ScheduleRegistrar
from stepflow.core.config import AppSettings
from stepflow.core.logging import configure_logging


def run(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register the workflow schedule")
    parser.add_argument("--state-machine-arn", required=True)
    parser.add_argument("--role-arn", required=True, help="Role EventBridge assumes to start executions")
    parser.add_argument("--endpoint-url", default=None, help="Override, e.g. http://localhost:4566")
    args = parser.parse_args(argv)

    settings = AppSettings()
    configure_logging(settings.log_level)
    registrar = ScheduleRegistrar(settings.schedule, endpoint_url=args.endpoint_url)
    rule_arn = registrar.register(args.state_machine_arn, args.role_arn)
    print(f"  Registered {settings.schedule.rule_name} ({settings.schedule.schedule_expression}): {rule_arn}")
    return 0


if __name__ == "__main__":
    sys.exit(run())
