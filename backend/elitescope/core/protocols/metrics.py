"""Metrics protocols for dependency injection.

- HttpMetrics: HTTP request/response instrumentation
- AccessMetrics: access-control denials on gated content
- MetricsRenderer: serialization for scraping
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HttpMetrics(Protocol):
    """HTTP request/response metrics collection."""

    def inc_in_progress(self, method: str) -> None:
        """Increment the in-progress gauge for the given HTTP method."""
        ...

    def dec_in_progress(self, method: str) -> None:
        """Decrement the in-progress gauge for the given HTTP method."""
        ...

    def observe_request(self, method: str, endpoint: str, status_code: str, duration: float) -> None:
        """Record a completed request (count and latency in seconds)."""
        ...

    def observe_response_size(self, method: str, endpoint: str, size: int) -> None:
        """Record the response body size in bytes."""
        ...


@runtime_checkable
class AccessMetrics(Protocol):
    """Counts requests refused by the access control layer."""

    def inc_denied(self, resource: str, reason: str) -> None:
        """Record a refused single-item read.

        Args:
            resource: Gated collection name (``reports``, ``education``, ...).
            reason: ``unauthorized`` or ``forbidden``.
        """
        ...


@runtime_checkable
class MetricsRenderer(Protocol):
    """Renders collected metrics into a scrapeable format."""

    @property
    def content_type(self) -> str:
        """MIME type of the rendered output."""
        ...

    def generate(self) -> bytes:
        """Serialize all collected metrics."""
        ...
