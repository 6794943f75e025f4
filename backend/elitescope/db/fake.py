"""Fake storage handle for unit tests."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from elitescope.core.exceptions import StorageUnavailableException


class FakeDatabase:
    """Stands in for :class:`elitescope.db.session.Database`.

    Fake repositories ignore the session, so ``session()`` yields None. Set
    ``available = False`` to simulate an unconfigured or unreachable backend.
    """

    def __init__(self, available: bool = True) -> None:
        """Create the fake in the given availability state."""
        self.available = available
        self.sessions_opened = 0

    @property
    def is_configured(self) -> bool:
        """Mirror of ``Database.is_configured``."""
        return self.available

    @property
    def health_engine(self):
        """The fake has no engine."""
        return None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[None, None]:
        """Yield a placeholder session or raise when unavailable."""
        if not self.available:
            raise StorageUnavailableException("No storage backend is configured")
        self.sessions_opened += 1
        yield None

    async def dispose(self) -> None:
        """Nothing to dispose."""
        return None
