"""Protocols for the elites domain."""

from typing import List, Optional, Protocol, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import schemas
from elitescope.crud._filters import SearchFilter
from elitescope.models.elite import Elite
from elitescope.models.elite_connection import EliteConnection
from elitescope.models.elite_organization import EliteOrganization


class EliteRepositoryProtocol(Protocol):
    """Data access for elite records."""

    async def get(self, db: AsyncSession, id: int) -> Optional[Elite]:
        """Get an elite by id."""
        ...

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Elite]:
        """Filtered listing ordered by name."""
        ...

    async def get_all(self, db: AsyncSession) -> List[Elite]:
        """Every elite ordered by name."""
        ...

    async def get_many(self, db: AsyncSession, ids: Sequence[int]) -> List[Elite]:
        """Elites whose id is in ``ids``."""
        ...

    async def count(self, db: AsyncSession) -> int:
        """Number of elites."""
        ...


class EliteConnectionRepositoryProtocol(Protocol):
    """Data access for the undirected connection graph."""

    async def get_for_elite(self, db: AsyncSession, elite_id: int) -> List[EliteConnection]:
        """Connections with ``elite_id`` at either endpoint, each once."""
        ...


class EliteAffiliationRepositoryProtocol(Protocol):
    """Data access for elite-organization affiliations."""

    async def get_for_elite(
        self, db: AsyncSession, elite_id: int, is_current: Optional[str] = None
    ) -> List[EliteOrganization]:
        """Affiliations of one elite."""
        ...


class EliteServiceProtocol(Protocol):
    """Read operations over elites and their relationships."""

    async def search(
        self,
        *,
        query: Optional[str] = None,
        sphere_of_influence: Optional[str] = None,
        political_orientation: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Elite]:
        """Search elites by text and categorical filters."""
        ...

    async def list_all(self) -> List[schemas.Elite]:
        """List every elite."""
        ...

    async def get(self, elite_id: int) -> schemas.Elite:
        """Get one elite or raise EliteNotFoundError."""
        ...

    async def get_connections(self, elite_id: int) -> List[schemas.EliteConnection]:
        """Connections of an elite."""
        ...

    async def get_organizations(
        self, elite_id: int, is_current: Optional[bool] = None
    ) -> List[schemas.EliteOrganization]:
        """Organization affiliations of an elite."""
        ...

    async def get_network(self, elite_id: int) -> schemas.EliteNetwork:
        """One-hop ego graph around an elite."""
        ...
