"""Unit tests for EducationService."""

from datetime import datetime

import pytest

from elitescope.adapters.metrics import FakeAccessMetrics
from elitescope.core.exceptions import PermissionException, UnauthorizedException
from elitescope.core.shared_models import UserRole
from elitescope.db.fake import FakeDatabase
from elitescope.domains.access.policy import Requester
from elitescope.domains.education.exceptions import EducationalResourceNotFoundError
from elitescope.domains.education.fakes.repository import FakeEducationalResourceRepository
from elitescope.domains.education.service import EducationService
from elitescope.models.educational_resource import EducationalResource


def _resource(id: int, level: str, resource_type: str = "Guide") -> EducationalResource:
    return EducationalResource(
        id=id,
        title=f"Resource {id}",
        resource_type=resource_type,
        access_level=level,
        created_at=datetime(2024, 1, id),
    )


@pytest.fixture
def metrics():
    return FakeAccessMetrics()


@pytest.fixture
def service(metrics):
    repo = FakeEducationalResourceRepository()
    repo.seed(
        _resource(1, "public"),
        _resource(2, "registered", resource_type="Course"),
        _resource(3, "expert", resource_type="Course"),
    )
    return EducationService(repo, FakeDatabase(), metrics)


@pytest.mark.asyncio
async def test_guest_sees_registered_resources(service):
    guest = Requester(authenticated=True, role=UserRole.GUEST, user_id=5)

    result = await service.list(guest)

    assert [r.id for r in result] == [2, 1]


@pytest.mark.asyncio
async def test_resource_type_filter(service):
    admin = Requester(authenticated=True, role=UserRole.ADMIN, user_id=1)

    result = await service.list(admin, resource_type="Course")

    assert [r.id for r in result] == [3, 2]


@pytest.mark.asyncio
async def test_anonymous_on_registered_resource(service, metrics):
    with pytest.raises(UnauthorizedException):
        await service.get(Requester.anonymous(), 2)

    assert metrics.denied == [("education", "unauthorized")]


@pytest.mark.asyncio
async def test_user_on_expert_resource(service, metrics):
    with pytest.raises(PermissionException):
        await service.get(Requester(authenticated=True, role=UserRole.USER, user_id=3), 3)

    assert metrics.denied == [("education", "forbidden")]


@pytest.mark.asyncio
async def test_missing_resource(service):
    with pytest.raises(EducationalResourceNotFoundError):
        await service.get(Requester.anonymous(), 42)
