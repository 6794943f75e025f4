"""Protocols for the political decisions domain."""

from typing import List, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import schemas
from elitescope.crud._filters import SearchFilter
from elitescope.models.political_decision import PoliticalDecision


class DecisionRepositoryProtocol(Protocol):
    """Data access for political decision records."""

    async def get(self, db: AsyncSession, id: int) -> Optional[PoliticalDecision]:
        """Get a decision by id."""
        ...

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[PoliticalDecision]:
        """Filtered listing, newest enactment first."""
        ...

    async def count(self, db: AsyncSession) -> int:
        """Number of decisions."""
        ...


class DecisionServiceProtocol(Protocol):
    """Read operations over political decisions."""

    async def search(
        self,
        *,
        query: Optional[str] = None,
        type: Optional[str] = None,
        category: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.PoliticalDecision]:
        """Search decisions."""
        ...

    async def get(self, decision_id: int) -> schemas.PoliticalDecision:
        """Get one decision or raise DecisionNotFoundError."""
        ...

    async def get_key_players(self, decision_id: int) -> List[schemas.Elite]:
        """Elites listed as key players, in listed order."""
        ...
