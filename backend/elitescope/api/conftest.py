"""API test fixtures.

Provides an async HTTP client wired to the FastAPI app with the DI container
overridden to use fakes. Available to all colocated API tests under api/.

Pattern:
    1. Override get_container -> returns test_container (real services, fake repos)
    2. Override get_context  -> returns ``api_context`` (anonymous by default)
    3. Test hits the endpoint, asserts on HTTP response + fake state

Tests that need a signed-in requester parametrize ``api_context`` directly::

    @pytest.mark.parametrize("api_context", [make_context(UserRole.ADMIN)])
"""

from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from elitescope import schemas
from elitescope.api.context import ApiContext
from elitescope.api.deps import get_container, get_context
from elitescope.core.logging import logger
from elitescope.core.shared_models import AuthMethod, UserRole

TEST_REQUEST_ID = "test-request-00000000"


def make_context(role: Optional[UserRole] = None, user_id: int = 1) -> ApiContext:
    """Build an ApiContext; anonymous when ``role`` is None."""
    if role is None:
        return ApiContext(
            request_id=TEST_REQUEST_ID,
            auth_method=AuthMethod.ANONYMOUS,
            logger=logger.with_context(request_id=TEST_REQUEST_ID),
        )
    user = schemas.User(id=user_id, open_id=f"auth0|user-{user_id}", role=role)
    return ApiContext(
        request_id=TEST_REQUEST_ID,
        user=user,
        auth_method=AuthMethod.AUTH0,
        auth_metadata={"test": True},
        logger=logger.with_context(request_id=TEST_REQUEST_ID, user_id=user_id),
    )


@pytest.fixture
def api_context() -> ApiContext:
    """Requester context for the request; anonymous unless parametrized."""
    return make_context()


@pytest_asyncio.fixture
async def client(test_container, api_context):
    """Async HTTP client with faked DI container and auth context."""
    from elitescope.main import app

    app.dependency_overrides[get_container] = lambda: test_container
    app.dependency_overrides[get_context] = lambda: api_context

    app.state.http_metrics = test_container.http_metrics

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
