"""Unit tests for UserService."""

from datetime import datetime

import pytest

from elitescope import schemas
from elitescope.core.exceptions import StorageUnavailableException
from elitescope.core.shared_models import UserRole
from elitescope.domains.users.service import UserService
from elitescope.models.user import User

OWNER = "auth0|owner"


@pytest.fixture
def service(fake_user_repo, fake_database):
    return UserService(fake_user_repo, fake_database, owner_open_id=OWNER)


@pytest.mark.asyncio
async def test_new_user_defaults_to_user_role(service):
    user = await service.upsert(schemas.UserUpsert(open_id="auth0|abc", email="a@example.com"))

    assert user.role == UserRole.USER
    assert user.email == "a@example.com"
    assert user.last_signed_in is not None


@pytest.mark.asyncio
async def test_owner_becomes_admin(service):
    user = await service.upsert(schemas.UserUpsert(open_id=OWNER))

    assert user.role == UserRole.ADMIN


@pytest.mark.asyncio
async def test_explicit_role_wins_over_owner_rule(service):
    user = await service.upsert(schemas.UserUpsert(open_id=OWNER, role=UserRole.EXPERT))

    assert user.role == UserRole.EXPERT


@pytest.mark.asyncio
async def test_refresh_keeps_role_and_unset_fields(service, fake_user_repo):
    fake_user_repo.seed(
        User(
            id=4,
            open_id="auth0|abc",
            role="expert",
            name="Existing Name",
            last_signed_in=datetime(2020, 1, 1),
        )
    )

    user = await service.upsert(schemas.UserUpsert(open_id="auth0|abc", login_method="auth0"))

    assert user.id == 4
    assert user.role == UserRole.EXPERT
    assert user.name == "Existing Name"
    assert user.login_method == "auth0"
    assert user.last_signed_in > datetime(2020, 1, 1)


@pytest.mark.asyncio
async def test_refresh_with_empty_claims_keeps_profile(service, fake_user_repo):
    fake_user_repo.seed(
        User(id=5, open_id="auth0|abc", role="user", email="keep@example.com", name="Kept")
    )

    user = await service.upsert(schemas.UserUpsert(open_id="auth0|abc", email=None, name=None))

    assert user.email == "keep@example.com"
    assert user.name == "Kept"


@pytest.mark.asyncio
async def test_get_by_open_id(service, fake_user_repo):
    fake_user_repo.seed(User(id=2, open_id="auth0|x", role="user"))

    assert (await service.get_by_open_id("auth0|x")).id == 2
    assert await service.get_by_open_id("auth0|missing") is None


@pytest.mark.asyncio
async def test_offline(service, fake_database):
    fake_database.available = False

    assert await service.get_by_open_id(OWNER) is None
    with pytest.raises(StorageUnavailableException):
        await service.upsert(schemas.UserUpsert(open_id=OWNER))
