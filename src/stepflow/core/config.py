"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class WorkflowConfig(BaseSettings):
    """In-process workflow configuration."""

    model_config = {"env_prefix": "STEPFLOW_WORKFLOW_"}

    state_machine_name: str = "DataMigrationWorkflow"
    processing_delay_seconds: float = 0.1


class StateMachineConfig(BaseSettings):
    """Step Functions state machine configuration."""

    model_config = {"env_prefix": "STEPFLOW_SFN_"}

    name: str = "DataMigrationWorkflow"
    timeout: int = 300  # seconds
    retry_attempts: int = 3
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class ScheduleConfig(BaseSettings):
    """EventBridge schedule configuration."""

    model_config = {"env_prefix": "STEPFLOW_SCHEDULE_"}

    rule_name: str = "DataMigrationSchedule"
    schedule_expression: str = "rate(5 minutes)"
    description: str = "Triggers data migration workflow every 5 minutes"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "STEPFLOW_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    workflow: WorkflowConfig = Field(default_factory=WorkflowConfig)
    state_machine: StateMachineConfig = Field(default_factory=StateMachineConfig)
    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)
