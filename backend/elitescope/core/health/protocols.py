"""Health protocols for dependency injection."""

from typing import Protocol, runtime_checkable

from elitescope.schemas.health import DependencyCheck, ReadinessResponse


@runtime_checkable
class HealthProbe(Protocol):
    """A single infrastructure check.

    Implementations return a ``DependencyCheck`` on success (``skipped`` when
    the dependency is not configured) and raise on failure.
    """

    @property
    def name(self) -> str:
        """Identifier surfaced in the readiness response."""
        ...

    async def check(self) -> DependencyCheck:
        """Probe the dependency."""
        ...


@runtime_checkable
class HealthServiceProtocol(Protocol):
    """Readiness facade that also owns the shutdown flag."""

    shutting_down: bool

    async def check_readiness(self, *, debug: bool) -> ReadinessResponse:
        """Probe every dependency and summarise the result."""
        ...
