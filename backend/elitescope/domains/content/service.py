"""Services for ungated content."""

from typing import List, Optional

from elitescope import schemas
from elitescope.core.shared_models import EventStatus
from elitescope.crud._filters import SearchFilter
from elitescope.db.availability import degrade_when_unavailable
from elitescope.db.session import Database
from elitescope.domains.content.exceptions import EventNotFoundError, PostNotFoundError
from elitescope.domains.content.protocols import (
    EventRepositoryProtocol,
    EventServiceProtocol,
    PostRepositoryProtocol,
    PostServiceProtocol,
    PublicationRepositoryProtocol,
    PublicationServiceProtocol,
)


class PostService(PostServiceProtocol):
    """Domain service for posts."""

    def __init__(
        self, post_repo: PostRepositoryProtocol, database: Database, default_limit: int = 20
    ) -> None:
        """Initialize with injected dependencies."""
        self._post_repo = post_repo
        self._database = database
        self._default_limit = default_limit

    @degrade_when_unavailable(default=[])
    async def list(
        self, *, category: Optional[str] = None, limit: Optional[int] = None, offset: int = 0
    ) -> List[schemas.Post]:
        """Posts in a category (or all), newest first."""
        filters = SearchFilter(
            exact={"category": category}, limit=limit or self._default_limit, offset=offset
        )
        async with self._database.session() as db:
            rows = await self._post_repo.search(db, filters)
            return [schemas.Post.model_validate(r) for r in rows]

    async def get_by_slug(self, slug: str) -> schemas.Post:
        """Get a post by slug."""
        post = await self._fetch(slug)
        if post is None:
            raise PostNotFoundError(slug)
        return post

    @degrade_when_unavailable(default=None)
    async def _fetch(self, slug: str) -> Optional[schemas.Post]:
        async with self._database.session() as db:
            row = await self._post_repo.get_by_slug(db, slug)
            return schemas.Post.model_validate(row) if row is not None else None


class EventService(EventServiceProtocol):
    """Domain service for events."""

    def __init__(
        self, event_repo: EventRepositoryProtocol, database: Database, default_limit: int = 20
    ) -> None:
        """Initialize with injected dependencies."""
        self._event_repo = event_repo
        self._database = database
        self._default_limit = default_limit

    @degrade_when_unavailable(default=[])
    async def list(
        self,
        *,
        status: Optional[EventStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Event]:
        """Events with a status (or all), latest start first."""
        filters = SearchFilter(
            exact={"status": EventStatus(status).value if status else None},
            limit=limit or self._default_limit,
            offset=offset,
        )
        async with self._database.session() as db:
            rows = await self._event_repo.search(db, filters)
            return [schemas.Event.model_validate(r) for r in rows]

    async def get(self, event_id: int) -> schemas.Event:
        """Get an event by id."""
        event = await self._fetch(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    @degrade_when_unavailable(default=None)
    async def _fetch(self, event_id: int) -> Optional[schemas.Event]:
        async with self._database.session() as db:
            row = await self._event_repo.get(db, event_id)
            return schemas.Event.model_validate(row) if row is not None else None


class PublicationService(PublicationServiceProtocol):
    """Domain service for publications."""

    def __init__(
        self,
        publication_repo: PublicationRepositoryProtocol,
        database: Database,
        default_limit: int = 20,
    ) -> None:
        """Initialize with injected dependencies."""
        self._publication_repo = publication_repo
        self._database = database
        self._default_limit = default_limit

    @degrade_when_unavailable(default=[])
    async def list(
        self,
        *,
        publication_type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Publication]:
        """Publications of a type (or all), newest first."""
        filters = SearchFilter(
            exact={"publication_type": publication_type},
            limit=limit or self._default_limit,
            offset=offset,
        )
        async with self._database.session() as db:
            rows = await self._publication_repo.search(db, filters)
            return [schemas.Publication.model_validate(r) for r in rows]
