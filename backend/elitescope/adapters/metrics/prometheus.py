"""Prometheus metrics adapters.

All collectors share one dedicated CollectorRegistry (owned by the container)
so API metrics stay out of the global default registry.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

from elitescope.core.protocols.metrics import AccessMetrics, HttpMetrics, MetricsRenderer

_RESPONSE_SIZE_BUCKETS = (100, 500, 1_000, 5_000, 10_000, 50_000, 100_000, 500_000, 1_000_000)


class PrometheusHttpMetrics(HttpMetrics):
    """Prometheus-backed HTTP metrics collection."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._requests_total = Counter(
            "elitescope_http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status_code"],
            registry=registry,
        )
        self._request_duration = Histogram(
            "elitescope_http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=registry,
        )
        self._in_progress = Gauge(
            "elitescope_http_requests_in_progress",
            "HTTP requests currently in progress",
            ["method"],
            registry=registry,
        )
        self._response_size = Histogram(
            "elitescope_http_response_size_bytes",
            "HTTP response size in bytes",
            ["method", "endpoint"],
            buckets=_RESPONSE_SIZE_BUCKETS,
            registry=registry,
        )

    def inc_in_progress(self, method: str) -> None:
        self._in_progress.labels(method=method).inc()

    def dec_in_progress(self, method: str) -> None:
        self._in_progress.labels(method=method).dec()

    def observe_request(self, method: str, endpoint: str, status_code: str, duration: float) -> None:
        self._requests_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
        self._request_duration.labels(method=method, endpoint=endpoint).observe(duration)

    def observe_response_size(self, method: str, endpoint: str, size: int) -> None:
        self._response_size.labels(method=method, endpoint=endpoint).observe(size)


class PrometheusAccessMetrics(AccessMetrics):
    """Counter of refused gated-content reads."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._denied = Counter(
            "elitescope_access_denied_total",
            "Single-item reads refused by the access control layer",
            ["resource", "reason"],
            registry=registry,
        )

    def inc_denied(self, resource: str, reason: str) -> None:
        self._denied.labels(resource=resource, reason=reason).inc()


class PrometheusMetricsRenderer(MetricsRenderer):
    """Renders every collector in the shared registry."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST

    def generate(self) -> bytes:
        return generate_latest(self._registry)
