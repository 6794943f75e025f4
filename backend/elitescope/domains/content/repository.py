"""Content repositories wrapping the crud singletons."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import crud
from elitescope.crud._filters import SearchFilter
from elitescope.domains.content.protocols import (
    EventRepositoryProtocol,
    PostRepositoryProtocol,
    PublicationRepositoryProtocol,
)
from elitescope.models.event import Event
from elitescope.models.post import Post
from elitescope.models.publication import Publication


class PostRepository(PostRepositoryProtocol):
    """Delegates to the crud.post singleton."""

    async def get_by_slug(self, db: AsyncSession, slug: str) -> Optional[Post]:
        """Get a post by slug."""
        return await crud.post.get_by_slug(db, slug)

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Post]:
        """Filtered listing, newest first."""
        return await crud.post.search(db, filters)


class EventRepository(EventRepositoryProtocol):
    """Delegates to the crud.event singleton."""

    async def get(self, db: AsyncSession, id: int) -> Optional[Event]:
        """Get an event by id."""
        return await crud.event.get(db, id)

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Event]:
        """Filtered listing, latest start first."""
        return await crud.event.search(db, filters)


class PublicationRepository(PublicationRepositoryProtocol):
    """Delegates to the crud.publication singleton."""

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Publication]:
        """Filtered listing, newest first."""
        return await crud.publication.search(db, filters)
