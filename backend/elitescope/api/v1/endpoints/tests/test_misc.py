"""API tests for content listings, stats and the current-user endpoint."""

from datetime import datetime

import pytest

from elitescope.api.conftest import make_context
from elitescope.core.shared_models import UserRole
from elitescope.models.event import Event
from elitescope.models.post import Post


@pytest.mark.asyncio
async def test_stats_zero_when_offline(client, fake_database):
    fake_database.available = False

    response = await client.get("/stats")

    assert response.status_code == 200
    assert response.json() == {"elites": 0, "organizations": 0, "decisions": 0, "reports": 0}


@pytest.mark.asyncio
async def test_me_anonymous(client):
    response = await client.get("/auth/me")

    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
@pytest.mark.parametrize("api_context", [make_context(UserRole.EXPERT, user_id=5)])
async def test_me_signed_in(client):
    response = await client.get("/auth/me")

    assert response.json()["id"] == 5
    assert response.json()["role"] == "expert"


@pytest.mark.asyncio
async def test_post_by_slug(client, fake_post_repo):
    fake_post_repo.seed(
        Post(id=1, title="Hello", slug="hello", publish_date=datetime(2024, 1, 1))
    )

    found = await client.get("/posts/hello")
    missing = await client.get("/posts/nope")

    assert found.json()["title"] == "Hello"
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_events_status_filter(client, fake_event_repo):
    fake_event_repo.seed(
        Event(id=1, title="Past", start_date=datetime(2023, 1, 1), status="completed"),
        Event(id=2, title="Soon", start_date=datetime(2025, 1, 1), status="upcoming"),
    )

    response = await client.get("/events", params={"status": "completed"})
    invalid = await client.get("/events", params={"status": "cancelled"})

    assert [e["id"] for e in response.json()] == [1]
    assert invalid.status_code == 422


@pytest.mark.asyncio
async def test_response_carries_request_id(client):
    response = await client.get("/stats")

    assert response.headers["X-Request-ID"]
