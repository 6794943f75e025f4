"""Elite service: catalog search and relationship queries."""

from typing import List, Optional, Tuple

from elitescope import schemas
from elitescope.core.shared_models import YesNo
from elitescope.crud._filters import SearchFilter
from elitescope.db.availability import degrade_when_unavailable
from elitescope.db.session import Database
from elitescope.domains.elites.exceptions import EliteNotFoundError
from elitescope.domains.elites.network import build_ego_graph
from elitescope.domains.elites.protocols import (
    EliteAffiliationRepositoryProtocol,
    EliteConnectionRepositoryProtocol,
    EliteRepositoryProtocol,
    EliteServiceProtocol,
)


class EliteService(EliteServiceProtocol):
    """Domain service for elites.

    Reads degrade to empty results when storage is unavailable; a missing
    elite (including one that cannot be fetched) raises EliteNotFoundError.
    """

    def __init__(
        self,
        elite_repo: EliteRepositoryProtocol,
        connection_repo: EliteConnectionRepositoryProtocol,
        affiliation_repo: EliteAffiliationRepositoryProtocol,
        database: Database,
        default_limit: int = 50,
    ) -> None:
        """Initialize with injected dependencies."""
        self._elite_repo = elite_repo
        self._connection_repo = connection_repo
        self._affiliation_repo = affiliation_repo
        self._database = database
        self._default_limit = default_limit

    @degrade_when_unavailable(default=[])
    async def search(
        self,
        *,
        query: Optional[str] = None,
        sphere_of_influence: Optional[str] = None,
        political_orientation: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Elite]:
        """Search elites by name/biography text and exact categories."""
        filters = SearchFilter(
            query=query,
            exact={
                "sphere_of_influence": sphere_of_influence,
                "political_orientation": political_orientation,
            },
            limit=limit or self._default_limit,
            offset=offset,
        )
        async with self._database.session() as db:
            rows = await self._elite_repo.search(db, filters)
            return [schemas.Elite.model_validate(r) for r in rows]

    @degrade_when_unavailable(default=[])
    async def list_all(self) -> List[schemas.Elite]:
        """List every elite ordered by name."""
        async with self._database.session() as db:
            rows = await self._elite_repo.get_all(db)
            return [schemas.Elite.model_validate(r) for r in rows]

    async def get(self, elite_id: int) -> schemas.Elite:
        """Get an elite by id."""
        elite = await self._fetch(elite_id)
        if elite is None:
            raise EliteNotFoundError(elite_id)
        return elite

    @degrade_when_unavailable(default=[])
    async def get_connections(self, elite_id: int) -> List[schemas.EliteConnection]:
        """Connections where the elite is either endpoint, each exactly once."""
        async with self._database.session() as db:
            rows = await self._connection_repo.get_for_elite(db, elite_id)
            return [schemas.EliteConnection.model_validate(r) for r in rows]

    @degrade_when_unavailable(default=[])
    async def get_organizations(
        self, elite_id: int, is_current: Optional[bool] = None
    ) -> List[schemas.EliteOrganization]:
        """Organization affiliations, optionally only current or only past."""
        flag = None
        if is_current is not None:
            flag = YesNo.YES.value if is_current else YesNo.NO.value
        async with self._database.session() as db:
            rows = await self._affiliation_repo.get_for_elite(db, elite_id, is_current=flag)
            return [schemas.EliteOrganization.model_validate(r) for r in rows]

    async def get_network(self, elite_id: int) -> schemas.EliteNetwork:
        """Ego graph of the elite and its direct connections."""
        fetched = await self._fetch_network(elite_id)
        if fetched is None:
            raise EliteNotFoundError(elite_id)
        center, connections, names = fetched
        return build_ego_graph(center, connections, names)

    # -- helpers -------------------------------------------------------------

    @degrade_when_unavailable(default=None)
    async def _fetch(self, elite_id: int) -> Optional[schemas.Elite]:
        async with self._database.session() as db:
            row = await self._elite_repo.get(db, elite_id)
            return schemas.Elite.model_validate(row) if row is not None else None

    @degrade_when_unavailable(default=None)
    async def _fetch_network(
        self, elite_id: int
    ) -> Optional[Tuple[schemas.Elite, List[schemas.EliteConnection], dict]]:
        async with self._database.session() as db:
            row = await self._elite_repo.get(db, elite_id)
            if row is None:
                return None
            center = schemas.Elite.model_validate(row)
            connections = [
                schemas.EliteConnection.model_validate(c)
                for c in await self._connection_repo.get_for_elite(db, elite_id)
            ]
            neighbour_ids = {c.elite_id_1 for c in connections} | {
                c.elite_id_2 for c in connections
            }
            neighbour_ids.discard(elite_id)
            neighbours = await self._elite_repo.get_many(db, sorted(neighbour_ids))
            return center, connections, {e.id: e.name for e in neighbours}
