"""Shared behaviour of services over gated content.

Listings are pre-filtered in the query to the requester's visible levels.
Single items are fetched first and then checked, so a missing item is a 404
for everyone while an existing one above the requester's tier is a 401/403.
"""

from typing import Any, Callable, Collection, Generic, List, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.core.exceptions import PermissionException, UnauthorizedException
from elitescope.core.protocols.metrics import AccessMetrics
from elitescope.crud._filters import SearchFilter
from elitescope.db.availability import degrade_when_unavailable
from elitescope.db.session import Database
from elitescope.domains.access.policy import Requester, check_item_access, visible_levels

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class GatedRepositoryProtocol(Protocol):
    """Data access for a collection of rows carrying ``access_level``."""

    async def get(self, db: AsyncSession, id: int) -> Optional[Any]:
        """Get a row by id, regardless of level."""
        ...

    async def search_visible(
        self, db: AsyncSession, filters: SearchFilter, access_levels: Collection[str]
    ) -> List[Any]:
        """Filtered listing restricted to ``access_levels``."""
        ...


class GatedContentService(Generic[SchemaT]):
    """Base class for reports and educational resources.

    Subclasses set ``resource``, ``schema`` and ``not_found``.
    """

    resource: str
    schema: Type[SchemaT]
    not_found: Callable[[int], Exception]

    def __init__(
        self,
        repo: GatedRepositoryProtocol,
        database: Database,
        access_metrics: AccessMetrics,
        default_limit: int = 20,
    ) -> None:
        """Initialize with injected dependencies."""
        self._repo = repo
        self._database = database
        self._access_metrics = access_metrics
        self._default_limit = default_limit

    def _filters(self, exact: dict, limit: Optional[int], offset: int) -> SearchFilter:
        return SearchFilter(exact=exact, limit=limit or self._default_limit, offset=offset)

    @degrade_when_unavailable(default=[])
    async def _list_visible(self, requester: Requester, filters: SearchFilter) -> List[SchemaT]:
        levels = visible_levels(requester.tier)
        async with self._database.session() as db:
            rows = await self._repo.search_visible(db, filters, levels)
            return [self.schema.model_validate(r) for r in rows]

    async def _get_checked(self, requester: Requester, item_id: int) -> SchemaT:
        item = await self._fetch(item_id)
        if item is None:
            raise self.not_found(item_id)
        try:
            check_item_access(requester, item.access_level)
        except UnauthorizedException:
            self._access_metrics.inc_denied(self.resource, "unauthorized")
            raise
        except PermissionException:
            self._access_metrics.inc_denied(self.resource, "forbidden")
            raise
        return item

    @degrade_when_unavailable(default=None)
    async def _fetch(self, item_id: int) -> Optional[SchemaT]:
        async with self._database.session() as db:
            row = await self._repo.get(db, item_id)
            return self.schema.model_validate(row) if row is not None else None
