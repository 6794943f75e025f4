"""Metrics adapters: Prometheus and fake implementations."""

from elitescope.adapters.metrics.fake import (
    FakeAccessMetrics,
    FakeHttpMetrics,
    FakeMetricsRenderer,
    RequestRecord,
)
from elitescope.adapters.metrics.prometheus import (
    PrometheusAccessMetrics,
    PrometheusHttpMetrics,
    PrometheusMetricsRenderer,
)

__all__ = [
    "FakeAccessMetrics",
    "FakeHttpMetrics",
    "FakeMetricsRenderer",
    "PrometheusAccessMetrics",
    "PrometheusHttpMetrics",
    "PrometheusMetricsRenderer",
    "RequestRecord",
]
