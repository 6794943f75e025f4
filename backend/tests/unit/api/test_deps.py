"""Unit tests for identity resolution and protocol injection."""

from types import SimpleNamespace

import pytest

from elitescope.api import deps
from elitescope.core.shared_models import AuthMethod, UserRole
from elitescope.db.fake import FakeDatabase
from elitescope.domains.reports.protocols import ReportServiceProtocol
from elitescope.domains.users.fakes.repository import FakeUserRepository
from elitescope.domains.users.service import UserService
from elitescope.models.user import User


@pytest.fixture
def user_repo():
    repo = FakeUserRepository()
    repo.seed(User(id=1, open_id="auth0|owner", role=UserRole.ADMIN.value))
    return repo


def _auth0_user(sub: str = "auth0|new", email: str = "new@example.com"):
    return SimpleNamespace(id=sub, email=email)


class TestAuth0User:
    @pytest.mark.asyncio
    async def test_upserts_user(self, user_repo):
        service = UserService(user_repo, FakeDatabase())

        user, method, metadata = await deps._authenticate_auth0_user(service, _auth0_user())

        assert user.open_id == "auth0|new"
        assert user.role == UserRole.USER
        assert method == AuthMethod.AUTH0
        assert metadata == {"auth0_id": "auth0|new"}

    @pytest.mark.asyncio
    async def test_token_without_email_keeps_stored_email(self, user_repo):
        user_repo.seed(
            User(id=2, open_id="auth0|abc", role=UserRole.USER.value, email="keep@example.com")
        )
        service = UserService(user_repo, FakeDatabase())

        user, _, _ = await deps._authenticate_auth0_user(
            service, _auth0_user(sub="auth0|abc", email=None)
        )

        assert user.email == "keep@example.com"
        assert (await service.get_by_open_id("auth0|abc")).email == "keep@example.com"

    @pytest.mark.asyncio
    async def test_storage_down_continues_without_user(self, user_repo):
        service = UserService(user_repo, FakeDatabase(available=False))

        user, method, metadata = await deps._authenticate_auth0_user(service, _auth0_user())

        assert user is None
        assert method == AuthMethod.AUTH0
        assert metadata == {"auth0_id": "auth0|new"}


class TestSystemUser:
    @pytest.mark.asyncio
    async def test_without_owner_is_anonymous(self, user_repo, monkeypatch):
        monkeypatch.setattr(deps.settings, "OWNER_OPEN_ID", None)
        service = UserService(user_repo, FakeDatabase())

        user, method, _ = await deps._authenticate_system_user(service)

        assert user is None
        assert method == AuthMethod.ANONYMOUS

    @pytest.mark.asyncio
    async def test_resolves_owner(self, user_repo, monkeypatch):
        monkeypatch.setattr(deps.settings, "OWNER_OPEN_ID", "auth0|owner")
        service = UserService(user_repo, FakeDatabase())

        user, method, metadata = await deps._authenticate_system_user(service)

        assert user.id == 1
        assert method == AuthMethod.SYSTEM
        assert metadata == {"disabled_auth": True}

    @pytest.mark.asyncio
    async def test_owner_unknown_when_storage_down(self, user_repo, monkeypatch):
        monkeypatch.setattr(deps.settings, "OWNER_OPEN_ID", "auth0|owner")
        service = UserService(user_repo, FakeDatabase(available=False))

        user, method, _ = await deps._authenticate_system_user(service)

        assert user is None
        assert method == AuthMethod.ANONYMOUS


class TestInject:
    def test_resolves_container_field(self):
        assert deps._resolve_field_name(ReportServiceProtocol) == "report_service"

    def test_unknown_protocol_raises(self):
        class Unbound:
            pass

        with pytest.raises(TypeError, match="No binding for Unbound"):
            deps._resolve_field_name(Unbound)

    def test_get_container_requires_initialization(self, monkeypatch):
        monkeypatch.setattr(deps.container_mod, "container", None)

        with pytest.raises(RuntimeError):
            deps.get_container()
