"""Main module of the FastAPI application.

This module sets up the FastAPI application, its middleware and exception
handlers, and the lifespan that wires the DI container.
"""

import os
import subprocess
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from elitescope.api.metrics import MetricsServer
from elitescope.api.middleware import (
    add_request_id,
    elitescope_exception_handler,
    exception_logging_middleware,
    http_metrics_middleware,
    log_requests,
    not_found_exception_handler,
    permission_exception_handler,
    request_timeout_middleware,
    storage_unavailable_exception_handler,
    unauthorized_exception_handler,
    validation_exception_handler,
)
from elitescope.api.v1.api import api_router
from elitescope.core.config import settings
from elitescope.core.config.enums import Environment
from elitescope.core.exceptions import (
    EliteScopeException,
    NotFoundException,
    PermissionException,
    StorageUnavailableException,
    UnauthorizedException,
)
from elitescope.core.logging import logger


def _run_migrations() -> None:
    """Apply all pending alembic migrations in a subprocess."""
    logger.info("Running alembic migrations...")
    env = os.environ.copy()
    backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env["PYTHONPATH"] = backend_dir
    subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "heads"],
        check=True,
        cwd=backend_dir,
        env=env,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events.

    Initializes the DI container, runs alembic migrations when enabled and
    starts the metrics server when a port is configured.
    """
    from elitescope.core import container as container_mod
    from elitescope.core.container import initialize_container, reset_container

    logger.info("Initializing dependency injection container...")
    initialize_container(settings)
    container = container_mod.container
    logger.info("Container initialized successfully")

    app.state.http_metrics = container.http_metrics

    if settings.RUN_ALEMBIC_MIGRATIONS:
        if container.database.is_configured:
            _run_migrations()
        else:
            logger.warning("RUN_ALEMBIC_MIGRATIONS is set but no storage is configured")

    metrics_server = None
    if settings.METRICS_PORT:
        metrics_server = MetricsServer(container.metrics_renderer, settings.METRICS_PORT)
        await metrics_server.start()

    try:
        yield
    finally:
        container.health.shutting_down = True
        if metrics_server:
            await metrics_server.stop()
        await container.database.dispose()
        reset_container()


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.include_router(api_router)

# Order matters: last registered = outermost middleware (processes request first)
app.middleware("http")(exception_logging_middleware)
app.middleware("http")(http_metrics_middleware)
app.middleware("http")(log_requests)
app.middleware("http")(request_timeout_middleware)
app.middleware("http")(add_request_id)

# Register exception handlers
app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ValidationError)(validation_exception_handler)
app.exception_handler(UnauthorizedException)(unauthorized_exception_handler)
app.exception_handler(PermissionException)(permission_exception_handler)
app.exception_handler(NotFoundException)(not_found_exception_handler)
app.exception_handler(StorageUnavailableException)(storage_unavailable_exception_handler)
app.exception_handler(EliteScopeException)(elitescope_exception_handler)

CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]

if settings.ADDITIONAL_CORS_ORIGINS:
    CORS_ORIGINS.extend(o.strip() for o in settings.ADDITIONAL_CORS_ORIGINS.split(","))

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.ENVIRONMENT == Environment.LOCAL else CORS_ORIGINS,
    allow_credentials=settings.ENVIRONMENT != Environment.LOCAL,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)
