"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from stepflow.core.config import AppSettings, ScheduleConfig, StateMachineConfig, WorkflowConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.workflow.state_machine_name == "DataMigrationWorkflow"


def test_state_machine_config_defaults():
    config = StateMachineConfig()
    assert config.name == "DataMigrationWorkflow"
    assert config.timeout == 300
    assert config.retry_attempts == 3
    assert config.endpoint_url is None


def test_schedule_config_defaults():
    config = ScheduleConfig()
    assert config.rule_name == "DataMigrationSchedule"
    assert config.schedule_expression == "rate(5 minutes)"


def test_workflow_delay_env_override(monkeypatch):
    monkeypatch.setenv("STEPFLOW_WORKFLOW_PROCESSING_DELAY_SECONDS", "0")
    assert WorkflowConfig().processing_delay_seconds == 0.0
    assert AppSettings().workflow.processing_delay_seconds == 0.0
