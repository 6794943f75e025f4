"""Protocols for the stats domain."""

from typing import Protocol

from elitescope import schemas


class StatsServiceProtocol(Protocol):
    """Catalog-wide counts."""

    async def get(self) -> schemas.Stats:
        """Counts of elites, organizations, decisions and reports."""
        ...
