"""Political decision repository wrapping crud.political_decision."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import crud
from elitescope.crud._filters import SearchFilter
from elitescope.domains.decisions.protocols import DecisionRepositoryProtocol
from elitescope.models.political_decision import PoliticalDecision


class DecisionRepository(DecisionRepositoryProtocol):
    """Delegates to the crud.political_decision singleton."""

    async def get(self, db: AsyncSession, id: int) -> Optional[PoliticalDecision]:
        """Get a decision by id."""
        return await crud.political_decision.get(db, id)

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[PoliticalDecision]:
        """Filtered listing, newest enactment first."""
        return await crud.political_decision.search(db, filters)

    async def count(self, db: AsyncSession) -> int:
        """Number of decisions."""
        return await crud.political_decision.count(db)
