"""Elite repositories wrapping the crud singletons."""

from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import crud
from elitescope.crud._filters import SearchFilter
from elitescope.domains.elites.protocols import (
    EliteAffiliationRepositoryProtocol,
    EliteConnectionRepositoryProtocol,
    EliteRepositoryProtocol,
)
from elitescope.models.elite import Elite
from elitescope.models.elite_connection import EliteConnection
from elitescope.models.elite_organization import EliteOrganization


class EliteRepository(EliteRepositoryProtocol):
    """Delegates to the crud.elite singleton."""

    async def get(self, db: AsyncSession, id: int) -> Optional[Elite]:
        """Get an elite by id."""
        return await crud.elite.get(db, id)

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Elite]:
        """Filtered listing ordered by name."""
        return await crud.elite.search(db, filters)

    async def get_all(self, db: AsyncSession) -> List[Elite]:
        """Every elite ordered by name."""
        return await crud.elite.get_all(db)

    async def get_many(self, db: AsyncSession, ids: Sequence[int]) -> List[Elite]:
        """Elites whose id is in ``ids``."""
        return await crud.elite.get_many(db, ids)

    async def count(self, db: AsyncSession) -> int:
        """Number of elites."""
        return await crud.elite.count(db)


class EliteConnectionRepository(EliteConnectionRepositoryProtocol):
    """Delegates to the crud.elite_connection singleton."""

    async def get_for_elite(self, db: AsyncSession, elite_id: int) -> List[EliteConnection]:
        """Connections with ``elite_id`` at either endpoint."""
        return await crud.elite_connection.get_for_elite(db, elite_id)


class EliteAffiliationRepository(EliteAffiliationRepositoryProtocol):
    """Delegates to the crud.elite_organization singleton."""

    async def get_for_elite(
        self, db: AsyncSession, elite_id: int, is_current: Optional[str] = None
    ) -> List[EliteOrganization]:
        """Affiliations of one elite."""
        return await crud.elite_organization.get_for_elite(db, elite_id, is_current=is_current)
