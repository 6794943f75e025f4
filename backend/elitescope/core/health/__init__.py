"""Health sub-package: readiness probes and orchestration."""

from elitescope.core.health.protocols import HealthProbe, HealthServiceProtocol
from elitescope.core.health.service import HealthService

__all__ = ["HealthProbe", "HealthService", "HealthServiceProtocol"]
