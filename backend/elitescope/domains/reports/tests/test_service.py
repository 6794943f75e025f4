"""Unit tests for ReportService.

Uses the in-memory report repository and FakeDatabase; no storage backend.
"""

from datetime import datetime

import pytest

from elitescope.adapters.metrics import FakeAccessMetrics
from elitescope.core.exceptions import PermissionException, UnauthorizedException
from elitescope.core.shared_models import UserRole
from elitescope.db.fake import FakeDatabase
from elitescope.domains.access.policy import Requester
from elitescope.domains.reports.exceptions import ReportNotFoundError
from elitescope.domains.reports.fakes.repository import FakeReportRepository
from elitescope.domains.reports.service import ReportService
from elitescope.models.report import Report

ANONYMOUS = Requester.anonymous()
USER = Requester(authenticated=True, role=UserRole.USER, user_id=1)
EXPERT = Requester(authenticated=True, role=UserRole.EXPERT, user_id=2)


def _report(id: int, level: str, day: int, type: str = "Analysis") -> Report:
    return Report(
        id=id,
        title=f"Report {id}",
        type=type,
        access_level=level,
        publish_date=datetime(2024, 3, day),
    )


@pytest.fixture
def repo():
    repo = FakeReportRepository()
    repo.seed(
        _report(1, "public", 1),
        _report(2, "registered", 2, type="Briefing"),
        _report(3, "expert", 3),
        _report(4, "public", 4, type="Briefing"),
    )
    return repo


@pytest.fixture
def metrics():
    return FakeAccessMetrics()


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def service(repo, database, metrics):
    return ReportService(repo, database, metrics)


class TestList:
    @pytest.mark.asyncio
    async def test_anonymous_sees_only_public_newest_first(self, service, repo):
        result = await service.list(ANONYMOUS)

        assert [r.id for r in result] == [4, 1]
        assert repo.requested_levels == [frozenset({"public"})]

    @pytest.mark.asyncio
    async def test_user_sees_public_and_registered(self, service):
        result = await service.list(USER)

        assert [r.id for r in result] == [4, 2, 1]

    @pytest.mark.asyncio
    async def test_expert_sees_everything(self, service):
        result = await service.list(EXPERT)

        assert [r.id for r in result] == [4, 3, 2, 1]

    @pytest.mark.asyncio
    async def test_type_filter_and_pagination(self, service):
        assert [r.id for r in await service.list(EXPERT, type="Briefing")] == [4, 2]
        assert [r.id for r in await service.list(EXPERT, limit=2, offset=1)] == [3, 2]

    @pytest.mark.asyncio
    async def test_offline_returns_empty(self, service, database):
        database.available = False

        assert await service.list(EXPERT) == []


class TestGet:
    @pytest.mark.asyncio
    async def test_public_report_for_anonymous(self, service, metrics):
        report = await service.get(ANONYMOUS, 1)

        assert report.id == 1
        assert metrics.denied == []

    @pytest.mark.asyncio
    async def test_gated_report_for_anonymous_is_unauthorized(self, service, metrics):
        with pytest.raises(UnauthorizedException):
            await service.get(ANONYMOUS, 2)

        assert metrics.denied == [("reports", "unauthorized")]

    @pytest.mark.asyncio
    async def test_expert_report_for_user_is_forbidden(self, service, metrics):
        with pytest.raises(PermissionException):
            await service.get(USER, 3)

        assert metrics.denied == [("reports", "forbidden")]

    @pytest.mark.asyncio
    async def test_missing_report_is_not_found_for_everyone(self, service, metrics):
        for requester in (ANONYMOUS, EXPERT):
            with pytest.raises(ReportNotFoundError):
                await service.get(requester, 99)

        assert metrics.denied == []

    @pytest.mark.asyncio
    async def test_offline_single_read_is_not_found(self, service, database):
        database.available = False

        with pytest.raises(ReportNotFoundError):
            await service.get(EXPERT, 1)
