"""Protocols for the ungated content domain."""

from typing import List, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import schemas
from elitescope.core.shared_models import EventStatus
from elitescope.crud._filters import SearchFilter
from elitescope.models.event import Event
from elitescope.models.post import Post
from elitescope.models.publication import Publication


class PostRepositoryProtocol(Protocol):
    """Data access for posts."""

    async def get_by_slug(self, db: AsyncSession, slug: str) -> Optional[Post]:
        """Get a post by slug."""
        ...

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Post]:
        """Filtered listing, newest first."""
        ...


class EventRepositoryProtocol(Protocol):
    """Data access for events."""

    async def get(self, db: AsyncSession, id: int) -> Optional[Event]:
        """Get an event by id."""
        ...

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Event]:
        """Filtered listing, latest start first."""
        ...


class PublicationRepositoryProtocol(Protocol):
    """Data access for publications."""

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Publication]:
        """Filtered listing, newest first."""
        ...


class PostServiceProtocol(Protocol):
    """Read operations over posts."""

    async def list(
        self, *, category: Optional[str] = None, limit: Optional[int] = None, offset: int = 0
    ) -> List[schemas.Post]:
        """List posts."""
        ...

    async def get_by_slug(self, slug: str) -> schemas.Post:
        """Get one post or raise PostNotFoundError."""
        ...


class EventServiceProtocol(Protocol):
    """Read operations over events."""

    async def list(
        self,
        *,
        status: Optional[EventStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Event]:
        """List events."""
        ...

    async def get(self, event_id: int) -> schemas.Event:
        """Get one event or raise EventNotFoundError."""
        ...


class PublicationServiceProtocol(Protocol):
    """Read operations over publications."""

    async def list(
        self,
        *,
        publication_type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Publication]:
        """List publications."""
        ...
