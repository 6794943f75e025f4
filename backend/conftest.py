"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and elitescope/),
making its fixtures available to centralized tests AND colocated domain tests.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables: must be set before any elitescope module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("AUTH_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")


# ---------------------------------------------------------------------------
# Shared fake fixtures: infrastructure
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_database():
    """Available fake storage handle; flip ``available`` to go offline."""
    from elitescope.db.fake import FakeDatabase

    return FakeDatabase()


@pytest.fixture
def fake_event_bus():
    """Fake EventBus that records published events."""
    from elitescope.adapters.event_bus.fake import FakeEventBus

    return FakeEventBus()


@pytest.fixture
def fake_health_service():
    """Fake HealthService that returns a canned readiness response."""
    from elitescope.core.health.fakes import FakeHealthService

    return FakeHealthService()


@pytest.fixture
def fake_http_metrics():
    """Fake HttpMetrics that records observations."""
    from elitescope.adapters.metrics import FakeHttpMetrics

    return FakeHttpMetrics()


@pytest.fixture
def fake_access_metrics():
    """Fake AccessMetrics that records denials."""
    from elitescope.adapters.metrics import FakeAccessMetrics

    return FakeAccessMetrics()


@pytest.fixture
def fake_metrics_renderer():
    """Fake MetricsRenderer with a fixed payload."""
    from elitescope.adapters.metrics import FakeMetricsRenderer

    return FakeMetricsRenderer()


# ---------------------------------------------------------------------------
# Shared fake fixtures: repositories
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_elite_repo():
    """In-memory elite repository."""
    from elitescope.domains.elites.fakes.repository import FakeEliteRepository

    return FakeEliteRepository()


@pytest.fixture
def fake_connection_repo():
    """In-memory elite connection repository."""
    from elitescope.domains.elites.fakes.repository import FakeEliteConnectionRepository

    return FakeEliteConnectionRepository()


@pytest.fixture
def fake_affiliation_repo():
    """In-memory elite affiliation repository."""
    from elitescope.domains.elites.fakes.repository import FakeEliteAffiliationRepository

    return FakeEliteAffiliationRepository()


@pytest.fixture
def fake_organization_repo():
    """In-memory organization repository."""
    from elitescope.domains.organizations.fakes.repository import FakeOrganizationRepository

    return FakeOrganizationRepository()


@pytest.fixture
def fake_decision_repo():
    """In-memory political decision repository."""
    from elitescope.domains.decisions.fakes.repository import FakeDecisionRepository

    return FakeDecisionRepository()


@pytest.fixture
def fake_report_repo():
    """In-memory report repository."""
    from elitescope.domains.reports.fakes.repository import FakeReportRepository

    return FakeReportRepository()


@pytest.fixture
def fake_education_repo():
    """In-memory educational resource repository."""
    from elitescope.domains.education.fakes.repository import (
        FakeEducationalResourceRepository,
    )

    return FakeEducationalResourceRepository()


@pytest.fixture
def fake_post_repo():
    """In-memory post repository."""
    from elitescope.domains.content.fakes.repository import FakePostRepository

    return FakePostRepository()


@pytest.fixture
def fake_event_repo():
    """In-memory event repository."""
    from elitescope.domains.content.fakes.repository import FakeEventRepository

    return FakeEventRepository()


@pytest.fixture
def fake_publication_repo():
    """In-memory publication repository."""
    from elitescope.domains.content.fakes.repository import FakePublicationRepository

    return FakePublicationRepository()


@pytest.fixture
def fake_newsletter_repo():
    """In-memory newsletter repository keyed by email."""
    from elitescope.domains.newsletter.fakes.repository import FakeNewsletterRepository

    return FakeNewsletterRepository()


@pytest.fixture
def fake_expert_access_repo():
    """In-memory expert access request repository."""
    from elitescope.domains.expert_access.fakes.repository import FakeExpertAccessRepository

    return FakeExpertAccessRepository()


@pytest.fixture
def fake_user_repo():
    """In-memory user repository keyed by open_id."""
    from elitescope.domains.users.fakes.repository import FakeUserRepository

    return FakeUserRepository()


# ---------------------------------------------------------------------------
# Composite container
# ---------------------------------------------------------------------------


@pytest.fixture
def test_container(
    fake_database,
    fake_event_bus,
    fake_health_service,
    fake_http_metrics,
    fake_access_metrics,
    fake_metrics_renderer,
    fake_elite_repo,
    fake_connection_repo,
    fake_affiliation_repo,
    fake_organization_repo,
    fake_decision_repo,
    fake_report_repo,
    fake_education_repo,
    fake_post_repo,
    fake_event_repo,
    fake_publication_repo,
    fake_newsletter_repo,
    fake_expert_access_repo,
    fake_user_repo,
):
    """A Container with real domain services wired to in-memory fakes.

    Seed the fake repositories (or flip ``fake_database.available``) to shape
    what the services see.
    """
    from elitescope.core.container import Container
    from elitescope.domains.content.service import (
        EventService,
        PostService,
        PublicationService,
    )
    from elitescope.domains.decisions.service import DecisionService
    from elitescope.domains.education.service import EducationService
    from elitescope.domains.elites.service import EliteService
    from elitescope.domains.expert_access.service import ExpertAccessService
    from elitescope.domains.newsletter.service import NewsletterService
    from elitescope.domains.organizations.service import OrganizationService
    from elitescope.domains.reports.service import ReportService
    from elitescope.domains.stats.service import StatsService
    from elitescope.domains.users.service import UserService

    return Container(
        database=fake_database,
        health=fake_health_service,
        event_bus=fake_event_bus,
        http_metrics=fake_http_metrics,
        access_metrics=fake_access_metrics,
        metrics_renderer=fake_metrics_renderer,
        elite_service=EliteService(
            fake_elite_repo, fake_connection_repo, fake_affiliation_repo, fake_database
        ),
        organization_service=OrganizationService(fake_organization_repo, fake_database),
        decision_service=DecisionService(fake_decision_repo, fake_elite_repo, fake_database),
        report_service=ReportService(fake_report_repo, fake_database, fake_access_metrics),
        education_service=EducationService(
            fake_education_repo, fake_database, fake_access_metrics
        ),
        post_service=PostService(fake_post_repo, fake_database),
        event_service=EventService(fake_event_repo, fake_database),
        publication_service=PublicationService(fake_publication_repo, fake_database),
        newsletter_service=NewsletterService(fake_newsletter_repo, fake_database),
        expert_access_service=ExpertAccessService(
            fake_expert_access_repo, fake_database, fake_event_bus
        ),
        user_service=UserService(fake_user_repo, fake_database),
        stats_service=StatsService(
            fake_elite_repo,
            fake_organization_repo,
            fake_decision_repo,
            fake_report_repo,
            fake_database,
        ),
    )
