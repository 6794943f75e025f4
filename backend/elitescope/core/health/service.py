"""HealthService: readiness-check facade."""

import asyncio
import errno
from collections.abc import Sequence

from elitescope.core.health.protocols import HealthProbe, HealthServiceProtocol
from elitescope.schemas.health import CheckStatus, DependencyCheck, ReadinessResponse


class HealthService(HealthServiceProtocol):
    """Runs probes concurrently and folds them into a ReadinessResponse.

    A failing probe makes the service ``not_ready``. A ``skipped`` probe (an
    unconfigured dependency) makes it ``degraded`` but still serving.
    """

    def __init__(self, probes: Sequence[HealthProbe], *, timeout: float = 5.0) -> None:
        """Initialise with the probes to run on every readiness check."""
        self._probes = list(probes)
        self._timeout = timeout
        self.shutting_down = False

    async def check_readiness(self, *, debug: bool) -> ReadinessResponse:
        """Evaluate readiness by probing dependencies concurrently."""
        if self.shutting_down:
            return ReadinessResponse(
                status="not_ready",
                checks={p.name: DependencyCheck(status=CheckStatus.skipped) for p in self._probes},
            )

        outcomes = await asyncio.gather(*(self._run_probe(p, debug) for p in self._probes))
        checks = dict(outcomes)
        statuses = {c.status for c in checks.values()}

        if CheckStatus.down in statuses:
            status = "not_ready"
        elif CheckStatus.skipped in statuses:
            status = "degraded"
        else:
            status = "ready"
        return ReadinessResponse(status=status, checks=checks)

    async def _run_probe(self, probe: HealthProbe, debug: bool) -> tuple[str, DependencyCheck]:
        try:
            result = await asyncio.wait_for(probe.check(), timeout=self._timeout)
        except Exception as exc:
            return probe.name, DependencyCheck(
                status=CheckStatus.down, error=self._sanitize_error(exc, debug=debug)
            )
        return probe.name, result

    @staticmethod
    def _sanitize_error(exc: Exception, *, debug: bool) -> str:
        """Reduce an exception to a category unless running in debug mode.

        Hostnames and ports must not leak to unauthenticated callers.
        """
        if debug:
            return str(exc)
        if isinstance(exc, asyncio.TimeoutError):
            return "timeout"
        cause = exc.__cause__
        os_err = getattr(exc, "errno", None) or getattr(cause, "errno", None)
        if os_err == errno.ECONNREFUSED:
            return "connection_refused"
        return "unavailable"
