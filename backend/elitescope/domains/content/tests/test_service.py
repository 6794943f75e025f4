"""Unit tests for the ungated content services: posts, events and publications."""

from datetime import datetime

import pytest

from elitescope.core.shared_models import EventStatus
from elitescope.domains.content.exceptions import EventNotFoundError, PostNotFoundError
from elitescope.domains.content.service import EventService, PostService, PublicationService
from elitescope.models.event import Event
from elitescope.models.post import Post
from elitescope.models.publication import Publication


class TestPostService:
    @pytest.fixture
    def service(self, fake_post_repo, fake_database):
        fake_post_repo.seed(
            Post(id=1, title="Old", slug="old", category="News", publish_date=datetime(2023, 1, 1)),
            Post(id=2, title="New", slug="new", category="News", publish_date=datetime(2024, 5, 1)),
            Post(
                id=3,
                title="Op-ed",
                slug="op-ed",
                category="Opinion",
                publish_date=datetime(2024, 2, 1),
            ),
        )
        return PostService(fake_post_repo, fake_database, default_limit=2)

    @pytest.mark.asyncio
    async def test_newest_first_with_default_limit(self, service):
        result = await service.list()

        assert [p.slug for p in result] == ["new", "op-ed"]

    @pytest.mark.asyncio
    async def test_category(self, service):
        result = await service.list(category="News", limit=10)

        assert [p.slug for p in result] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_get_by_slug(self, service):
        assert (await service.get_by_slug("op-ed")).id == 3

    @pytest.mark.asyncio
    async def test_unknown_slug(self, service):
        with pytest.raises(PostNotFoundError):
            await service.get_by_slug("missing")

    @pytest.mark.asyncio
    async def test_offline(self, service, fake_database):
        fake_database.available = False

        assert await service.list() == []
        with pytest.raises(PostNotFoundError):
            await service.get_by_slug("new")


class TestEventService:
    @pytest.fixture
    def service(self, fake_event_repo, fake_database):
        fake_event_repo.seed(
            Event(id=1, title="Forum", start_date=datetime(2024, 9, 1), status="upcoming"),
            Event(id=2, title="Summit", start_date=datetime(2023, 9, 1), status="completed"),
            Event(id=3, title="Briefing", start_date=datetime(2024, 10, 1), status="upcoming"),
        )
        return EventService(fake_event_repo, fake_database)

    @pytest.mark.asyncio
    async def test_status_filter(self, service):
        result = await service.list(status=EventStatus.UPCOMING)

        assert [e.id for e in result] == [3, 1]

    @pytest.mark.asyncio
    async def test_all_latest_start_first(self, service):
        assert [e.id for e in await service.list()] == [3, 1, 2]

    @pytest.mark.asyncio
    async def test_get(self, service):
        event = await service.get(2)

        assert event.status == EventStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_get_missing(self, service):
        with pytest.raises(EventNotFoundError):
            await service.get(7)


class TestPublicationService:
    @pytest.fixture
    def service(self, fake_publication_repo, fake_database):
        fake_publication_repo.seed(
            Publication(
                id=1,
                title="Working paper",
                publication_type="Paper",
                publication_date=datetime(2022, 1, 1),
            ),
            Publication(
                id=2,
                title="Annual book",
                publication_type="Book",
                publication_date=datetime(2024, 1, 1),
            ),
            Publication(id=3, title="Draft", publication_type="Paper"),
        )
        return PublicationService(fake_publication_repo, fake_database)

    @pytest.mark.asyncio
    async def test_type_filter_undated_last(self, service):
        result = await service.list(publication_type="Paper")

        assert [p.id for p in result] == [1, 3]

    @pytest.mark.asyncio
    async def test_offline(self, service, fake_database):
        fake_database.available = False

        assert await service.list() == []
