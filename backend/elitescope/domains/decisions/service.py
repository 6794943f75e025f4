"""Political decision service."""

from typing import List, Optional

from elitescope import schemas
from elitescope.crud._filters import SearchFilter
from elitescope.db.availability import degrade_when_unavailable
from elitescope.db.session import Database
from elitescope.domains.decisions.exceptions import DecisionNotFoundError
from elitescope.domains.decisions.protocols import (
    DecisionRepositoryProtocol,
    DecisionServiceProtocol,
)
from elitescope.domains.elites.protocols import EliteRepositoryProtocol


class DecisionService(DecisionServiceProtocol):
    """Domain service for political decisions."""

    def __init__(
        self,
        decision_repo: DecisionRepositoryProtocol,
        elite_repo: EliteRepositoryProtocol,
        database: Database,
        default_limit: int = 50,
    ) -> None:
        """Initialize with injected dependencies."""
        self._decision_repo = decision_repo
        self._elite_repo = elite_repo
        self._database = database
        self._default_limit = default_limit

    @degrade_when_unavailable(default=[])
    async def search(
        self,
        *,
        query: Optional[str] = None,
        type: Optional[str] = None,
        category: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.PoliticalDecision]:
        """Search decisions by title/description text, type and category."""
        filters = SearchFilter(
            query=query,
            exact={"type": type, "category": category},
            limit=limit or self._default_limit,
            offset=offset,
        )
        async with self._database.session() as db:
            rows = await self._decision_repo.search(db, filters)
            return [schemas.PoliticalDecision.model_validate(r) for r in rows]

    async def get(self, decision_id: int) -> schemas.PoliticalDecision:
        """Get a decision by id."""
        decision = await self._fetch(decision_id)
        if decision is None:
            raise DecisionNotFoundError(decision_id)
        return decision

    async def get_key_players(self, decision_id: int) -> List[schemas.Elite]:
        """Resolve ``key_players`` to elites.

        Order follows the stored list; ids without an elite row are skipped.
        """
        decision = await self.get(decision_id)
        return await self._fetch_elites(decision.key_players)

    @degrade_when_unavailable(default=None)
    async def _fetch(self, decision_id: int) -> Optional[schemas.PoliticalDecision]:
        async with self._database.session() as db:
            row = await self._decision_repo.get(db, decision_id)
            return schemas.PoliticalDecision.model_validate(row) if row is not None else None

    @degrade_when_unavailable(default=[])
    async def _fetch_elites(self, ids: List[int]) -> List[schemas.Elite]:
        if not ids:
            return []
        async with self._database.session() as db:
            by_id = {e.id: e for e in await self._elite_repo.get_many(db, ids)}
            ordered = []
            for elite_id in dict.fromkeys(ids):
                if elite_id in by_id:
                    ordered.append(schemas.Elite.model_validate(by_id[elite_id]))
            return ordered
