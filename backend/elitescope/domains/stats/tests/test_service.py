"""Unit tests for StatsService."""

from datetime import datetime

import pytest

from elitescope.domains.stats.service import StatsService
from elitescope.models.elite import Elite
from elitescope.models.organization import Organization
from elitescope.models.report import Report


@pytest.fixture
def service(
    fake_elite_repo, fake_organization_repo, fake_decision_repo, fake_report_repo, fake_database
):
    return StatsService(
        fake_elite_repo,
        fake_organization_repo,
        fake_decision_repo,
        fake_report_repo,
        fake_database,
    )


@pytest.mark.asyncio
async def test_counts(service, fake_elite_repo, fake_organization_repo, fake_report_repo):
    fake_elite_repo.seed(Elite(id=1, name="A"), Elite(id=2, name="B"))
    fake_organization_repo.seed(Organization(id=1, name="Org", type="Media"))
    fake_report_repo.seed(
        Report(
            id=1,
            title="R",
            type="Analysis",
            access_level="expert",
            publish_date=datetime(2024, 1, 1),
        )
    )

    stats = await service.get()

    assert stats.model_dump() == {"elites": 2, "organizations": 1, "decisions": 0, "reports": 1}


@pytest.mark.asyncio
async def test_zeros_when_offline(service, fake_elite_repo, fake_database):
    fake_elite_repo.seed(Elite(id=1, name="A"))
    fake_database.available = False

    stats = await service.get()

    assert stats.model_dump() == {"elites": 0, "organizations": 0, "decisions": 0, "reports": 0}
