"""Fake content repositories for testing."""

from typing import List, Optional

from elitescope.core.fakes.store import apply_filter
from elitescope.crud._filters import SearchFilter
from elitescope.models.event import Event
from elitescope.models.post import Post
from elitescope.models.publication import Publication


class FakePostRepository:
    """In-memory fake for PostRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._store: dict[int, Post] = {}

    def seed(self, *posts: Post) -> None:
        """Seed posts by id."""
        for post in posts:
            self._store[post.id] = post

    async def get_by_slug(self, db, slug: str) -> Optional[Post]:
        """Return the seeded post with ``slug``."""
        return next((p for p in self._store.values() if p.slug == slug), None)

    async def search(self, db, filters: SearchFilter) -> List[Post]:
        """Seeded posts, newest first."""
        return apply_filter(
            self._store.values(), filters, sort_key=lambda p: p.publish_date, descending=True
        )


class FakeEventRepository:
    """In-memory fake for EventRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._store: dict[int, Event] = {}

    def seed(self, *events: Event) -> None:
        """Seed events by id."""
        for event in events:
            self._store[event.id] = event

    async def get(self, db, id: int) -> Optional[Event]:
        """Return a seeded event."""
        return self._store.get(id)

    async def search(self, db, filters: SearchFilter) -> List[Event]:
        """Seeded events, latest start first."""
        return apply_filter(
            self._store.values(), filters, sort_key=lambda e: e.start_date, descending=True
        )


class FakePublicationRepository:
    """In-memory fake for PublicationRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._store: dict[int, Publication] = {}

    def seed(self, *publications: Publication) -> None:
        """Seed publications by id."""
        for publication in publications:
            self._store[publication.id] = publication

    async def search(self, db, filters: SearchFilter) -> List[Publication]:
        """Seeded publications, newest first."""
        return apply_filter(
            self._store.values(),
            filters,
            sort_key=lambda p: p.publication_date,
            descending=True,
        )
