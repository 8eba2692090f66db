"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from stepflow.api.routes import executions, health
from stepflow.core.config import AppSettings
from stepflow.core.logging import configure_logging
from stepflow.workflow.factory import WorkflowFactory


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings = AppSettings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.workflow = WorkflowFactory.create_data_migration_workflow(config=settings.workflow)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="stepflow workflow runner",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(executions.router)
    return app
