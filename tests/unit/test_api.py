"""Tests for the HTTP surface."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from stepflow.api.app import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("STEPFLOW_WORKFLOW_PROCESSING_DELAY_SECONDS", "0")
    with TestClient(create_app()) as c:
        yield c


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_ready_after_startup(client):
    assert client.get("/ready").json() == {"status": "ready"}


def test_execution_success(client):
    resp = client.post(
        "/executions",
        json={"executionId": "api-1", "timestamp": "2025-01-01T00:00:00Z", "data": {"x": 1}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["executionId"] == "api-1"
    assert body["result"]["DataProcessing"]["inputData"] == {"x": 1}
    assert body["terminalState"] == "WorkflowSucceeded"


def test_execution_failure_routes_to_failed_state(client):
    body = client.post("/executions", json={"executionId": "", "timestamp": "t"}).json()
    assert body["success"] is False
    assert "Validation" in body["error"]
    assert body["terminalState"] == "WorkflowFailed"
