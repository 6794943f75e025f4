"""Middleware for the FastAPI application.

This module contains middleware that process requests and responses, and the
exception handlers that map domain exceptions to HTTP status codes.
"""

import asyncio
import time
import traceback
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from elitescope.core.config import settings
from elitescope.core.exceptions import (
    ConflictException,
    EliteScopeException,
    NotFoundException,
    PermissionException,
    StorageUnavailableException,
    UnauthorizedException,
    unpack_validation_error,
)
from elitescope.core.logging import logger


async def add_request_id(request: Request, call_next: callable) -> Response:
    """Middleware to generate and add a request ID to the request for tracing.

    Args:
    ----
        request (Request): The incoming request.
        call_next (callable): The next middleware in the chain.

    Returns:
    -------
        Response: The response to the incoming request.

    """
    request.state.request_id = str(uuid.uuid4())
    response = await call_next(request)
    response.headers["X-Request-ID"] = request.state.request_id
    return response


async def log_requests(request: Request, call_next: callable) -> Response:
    """Middleware to log incoming requests."""
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time
    logger.with_context(request_id=getattr(request.state, "request_id", None)).info(
        f"Handled request {request.method} {request.url.path} in {duration:.2f} seconds. "
        f"Response code: {response.status_code}"
    )
    return response


async def exception_logging_middleware(request: Request, call_next: callable) -> Response:
    """Middleware to log unhandled exceptions and turn them into 500 responses.

    Args:
    ----
        request (Request): The incoming request.
        call_next (callable): The next middleware in the chain.

    Returns:
    -------
        Response: The response to the incoming request.

    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error(f"Unhandled exception: {exc}\n{traceback.format_exc()}")

        response_content = {
            "detail": f"Internal Server Error: {exc.__class__.__name__}: {str(exc)}"
        }
        if settings.DEBUG:
            response_content["trace"] = traceback.format_exc()

        return JSONResponse(status_code=500, content=response_content)


async def request_timeout_middleware(request: Request, call_next: callable) -> Response:
    """Middleware to enforce request timeout.

    Returns:
    -------
        Response: The response to the incoming request or 504 on timeout.

    """
    try:
        return await asyncio.wait_for(
            call_next(request), timeout=settings.API_REQUEST_TIMEOUT_SECONDS
        )
    except asyncio.TimeoutError:
        logger.warning(
            f"Request timeout after {settings.API_REQUEST_TIMEOUT_SECONDS}s: "
            f"{request.method} {request.url}"
        )
        return JSONResponse(
            status_code=504,
            content={
                "detail": f"Request timeout after {settings.API_REQUEST_TIMEOUT_SECONDS} seconds"
            },
        )


# Exception handlers
async def validation_exception_handler(
    request: Request, exc: RequestValidationError | ValidationError
) -> JSONResponse:
    """Exception handler for validation errors that occur during request processing.

    Example of JSON output:
        {
            "errors": [
                {"body.email": "value is not a valid email address"},
                {"query.limit": "Input should be greater than or equal to 1"}
            ]
        }

    """
    error_messages = unpack_validation_error(exc)
    logger.warning(f"Validation error: {error_messages}")
    return JSONResponse(status_code=422, content=error_messages)


async def unauthorized_exception_handler(
    request: Request, exc: UnauthorizedException
) -> JSONResponse:
    """Exception handler for UnauthorizedException (401)."""
    return JSONResponse(
        status_code=401,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def permission_exception_handler(request: Request, exc: PermissionException) -> JSONResponse:
    """Exception handler for PermissionException.

    Args:
    ----
        request (Request): The incoming request that triggered the exception.
        exc (PermissionException): The exception object that was raised.

    Returns:
    -------
        JSONResponse: A 403 Forbidden status response that details the error message.

    """
    return JSONResponse(status_code=403, content={"detail": str(exc)})


async def not_found_exception_handler(request: Request, exc: NotFoundException) -> JSONResponse:
    """Exception handler for NotFoundException (404)."""
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def storage_unavailable_exception_handler(
    request: Request, exc: StorageUnavailableException
) -> JSONResponse:
    """Exception handler for StorageUnavailableException.

    Only writes reach this handler; reads degrade to empty results.
    """
    logger.warning(f"Storage unavailable for {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Storage backend is unavailable"})


async def elitescope_exception_handler(request: Request, exc: EliteScopeException) -> JSONResponse:
    """Generic exception handler for all EliteScopeException types.

    Maps exception base classes to HTTP status codes, so any domain exception
    inheriting from a mapped base gets the right code without its own handler.
    """
    status_map = {
        ConflictException: 409,
    }

    for exc_type, code in status_map.items():
        if isinstance(exc, exc_type):
            return JSONResponse(status_code=code, content={"detail": str(exc)})

    logger.error(f"Unmapped domain exception {exc.__class__.__name__}: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


_METRICS_SKIP_PREFIXES = (
    "/health",
    "/metrics",
    "/docs",
    "/openapi.json",
    "/favicon.ico",
    "/redoc",
)
_METRICS_SKIP_EXACT = frozenset(_METRICS_SKIP_PREFIXES)
_METRICS_SKIP_SLASH = tuple(p + "/" for p in _METRICS_SKIP_PREFIXES)


async def http_metrics_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Middleware to record HTTP metrics (counts, latency, in-flight, size).

    Reads the ``HttpMetrics`` implementation from ``request.app.state.http_metrics``
    so the middleware is decoupled from any concrete metrics library.
    """
    path = request.url.path
    if path in _METRICS_SKIP_EXACT or path.startswith(_METRICS_SKIP_SLASH):
        return await call_next(request)

    metrics = request.app.state.http_metrics
    method = request.method
    metrics.inc_in_progress(method)
    start = time.perf_counter()
    try:
        response = await call_next(request)
    finally:
        metrics.dec_in_progress(method)

    endpoint = _build_endpoint_name(request, fallback="unmatched")
    metrics.observe_request(
        method=method,
        endpoint=endpoint,
        status_code=str(response.status_code),
        duration=time.perf_counter() - start,
    )
    content_length = response.headers.get("content-length")
    if content_length is not None:
        metrics.observe_response_size(method=method, endpoint=endpoint, size=int(content_length))
    return response


def _build_endpoint_name(request: Request, *, fallback: str | None = None) -> str:
    """Build endpoint name using FastAPI's route information.

    Depending on the FastAPI version, the matched route's ``path`` is either
    the full template or only the part below its ``include_router`` prefix.
    Prefixes carry no path parameters, so the missing leading segments are
    taken from the concrete request path.

    Args:
        request: The incoming request.
        fallback: Value to return when no route is matched. Defaults to the
            raw request path (stripped of trailing slash). The metrics
            middleware passes ``"unmatched"`` to cap label cardinality.

    Returns:
        str: endpoint path template like "/elites/{elite_id}/network"
    """
    route = request.scope.get("route")
    if not (route and hasattr(route, "path")):
        return fallback if fallback is not None else request.url.path.rstrip("/")

    template = route.path
    concrete = [s for s in request.url.path.split("/") if s]
    templated = [s for s in template.split("/") if s]
    prefix_len = len(concrete) - len(templated)
    if prefix_len <= 0:
        return template
    prefix = "/" + "/".join(concrete[:prefix_len])
    return f"{prefix}{template}" if template else prefix
