"""API tests for the write endpoints: newsletter and expert access."""

import pytest

from elitescope.api.conftest import make_context
from elitescope.core.shared_models import UserRole

ADMIN = make_context(UserRole.ADMIN, user_id=1)
EXPERT = make_context(UserRole.EXPERT, user_id=2)

REQUEST_BODY = {
    "name": "Dr. Rivera",
    "email": "rivera@university.edu",
    "justification": "Research on lobbying networks",
}


# ---------------------------------------------------------------------------
# newsletter
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_subscribe(client, fake_newsletter_repo):
    response = await client.post(
        "/newsletter/subscribe", json={"email": "Reader@Example.com", "name": "Reader"}
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert [r.email for r in fake_newsletter_repo.rows()] == ["reader@example.com"]


@pytest.mark.asyncio
async def test_subscribe_rejects_invalid_email(client):
    response = await client.post("/newsletter/subscribe", json={"email": "not-an-email"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_subscribe_offline_is_503(client, fake_database):
    fake_database.available = False

    response = await client.post("/newsletter/subscribe", json={"email": "a@example.com"})

    assert response.status_code == 503
    assert response.json() == {"detail": "Storage backend is unavailable"}


# ---------------------------------------------------------------------------
# expert access
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_anonymous_can_submit(client, fake_event_bus):
    response = await client.post("/expert-access/requests", json=REQUEST_BODY)

    assert response.status_code == 200
    fake_event_bus.assert_published("expert_access.submitted")


@pytest.mark.asyncio
async def test_anonymous_cannot_list(client):
    response = await client.get("/expert-access/requests")

    assert response.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("api_context", [ADMIN])
async def test_admin_reviews_once(client):
    await client.post("/expert-access/requests", json=REQUEST_BODY)

    pending = await client.get("/expert-access/requests", params={"status": "pending"})
    request_id = pending.json()[0]["id"]

    first = await client.patch(
        f"/expert-access/requests/{request_id}", json={"status": "approved"}
    )
    second = await client.patch(
        f"/expert-access/requests/{request_id}", json={"status": "rejected"}
    )

    assert first.status_code == 200
    assert first.json() == {"success": True}
    assert second.status_code == 409

    stored = (await client.get("/expert-access/requests")).json()[0]
    assert stored["status"] == "approved"
    assert stored["reviewed_by"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("api_context", [ADMIN])
async def test_review_missing_is_404(client):
    response = await client.patch("/expert-access/requests/77", json={"status": "approved"})

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("api_context", [ADMIN])
async def test_review_rejects_pending_status(client):
    response = await client.patch("/expert-access/requests/1", json={"status": "pending"})

    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("api_context", [EXPERT])
async def test_expert_cannot_review(client):
    await client.post("/expert-access/requests", json=REQUEST_BODY)

    response = await client.patch("/expert-access/requests/1", json={"status": "approved"})

    assert response.status_code == 403
