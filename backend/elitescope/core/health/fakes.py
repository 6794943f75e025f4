"""Fakes for health probes and service, used in unit tests."""

import asyncio

from elitescope.core.health.protocols import HealthProbe, HealthServiceProtocol
from elitescope.schemas.health import CheckStatus, DependencyCheck, ReadinessResponse


class FakeHealthService(HealthServiceProtocol):
    """Returns a canned ReadinessResponse and records calls."""

    def __init__(self) -> None:
        """Initialise with a ``ready`` response."""
        self.shutting_down = False
        self.response = ReadinessResponse(
            status="ready", checks={"postgres": DependencyCheck(status=CheckStatus.up)}
        )
        self.calls: list[bool] = []

    async def check_readiness(self, *, debug: bool) -> ReadinessResponse:
        """Return the canned response."""
        self.calls.append(debug)
        return self.response


class FakeProbe(HealthProbe):
    """Probe that reports a fixed status, or raises ``exc`` when given one."""

    def __init__(
        self,
        name: str,
        *,
        status: CheckStatus = CheckStatus.up,
        exc: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        """Configure the probe outcome."""
        self._name = name
        self._status = status
        self._exc = exc
        self._delay = delay

    @property
    def name(self) -> str:
        """Probe identifier."""
        return self._name

    async def check(self) -> DependencyCheck:
        """Return the configured status after ``delay`` seconds."""
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._exc is not None:
            raise self._exc
        return DependencyCheck(status=self._status, latency_ms=1.0)
