"""Container Factory.

All construction logic lives here. The factory reads settings and builds the
container; nothing else in the codebase creates engines or registries.
"""

from prometheus_client import CollectorRegistry

from elitescope.adapters.event_bus.in_memory import InMemoryEventBus
from elitescope.adapters.health.postgres import PostgresHealthProbe
from elitescope.adapters.metrics import (
    PrometheusAccessMetrics,
    PrometheusHttpMetrics,
    PrometheusMetricsRenderer,
)
from elitescope.core.config import Settings
from elitescope.core.container.container import Container
from elitescope.core.health.service import HealthService
from elitescope.core.logging import logger
from elitescope.core.protocols.event_bus import EventBus
from elitescope.db.session import Database
from elitescope.domains.content.repository import (
    EventRepository,
    PostRepository,
    PublicationRepository,
)
from elitescope.domains.content.service import EventService, PostService, PublicationService
from elitescope.domains.decisions.repository import DecisionRepository
from elitescope.domains.decisions.service import DecisionService
from elitescope.domains.education.repository import EducationalResourceRepository
from elitescope.domains.education.service import EducationService
from elitescope.domains.elites.repository import (
    EliteAffiliationRepository,
    EliteConnectionRepository,
    EliteRepository,
)
from elitescope.domains.elites.service import EliteService
from elitescope.domains.expert_access.repository import ExpertAccessRepository
from elitescope.domains.expert_access.service import ExpertAccessService
from elitescope.domains.expert_access.subscribers import ExpertAccessAuditSubscriber
from elitescope.domains.newsletter.repository import NewsletterRepository
from elitescope.domains.newsletter.service import NewsletterService
from elitescope.domains.organizations.repository import OrganizationRepository
from elitescope.domains.organizations.service import OrganizationService
from elitescope.domains.reports.repository import ReportRepository
from elitescope.domains.reports.service import ReportService
from elitescope.domains.stats.service import StatsService
from elitescope.domains.users.repository import UserRepository
from elitescope.domains.users.service import UserService


def create_container(settings: Settings) -> Container:
    """Build the container from settings.

    Args:
        settings: Application settings (from core/config)

    Returns:
        Fully constructed Container ready for use
    """
    database = _create_database(settings)
    registry = CollectorRegistry()
    access_metrics = PrometheusAccessMetrics(registry=registry)
    event_bus = _create_event_bus()

    catalog_limit = settings.CATALOG_DEFAULT_LIMIT
    content_limit = settings.CONTENT_DEFAULT_LIMIT

    elite_repo = EliteRepository()
    organization_repo = OrganizationRepository()
    decision_repo = DecisionRepository()
    report_repo = ReportRepository()

    return Container(
        database=database,
        health=HealthService([PostgresHealthProbe(database)]),
        event_bus=event_bus,
        http_metrics=PrometheusHttpMetrics(registry=registry),
        access_metrics=access_metrics,
        metrics_renderer=PrometheusMetricsRenderer(registry=registry),
        elite_service=EliteService(
            elite_repo,
            EliteConnectionRepository(),
            EliteAffiliationRepository(),
            database,
            default_limit=catalog_limit,
        ),
        organization_service=OrganizationService(
            organization_repo, database, default_limit=catalog_limit
        ),
        decision_service=DecisionService(
            decision_repo, elite_repo, database, default_limit=catalog_limit
        ),
        report_service=ReportService(
            report_repo, database, access_metrics, default_limit=content_limit
        ),
        education_service=EducationService(
            EducationalResourceRepository(), database, access_metrics, default_limit=content_limit
        ),
        post_service=PostService(PostRepository(), database, default_limit=content_limit),
        event_service=EventService(EventRepository(), database, default_limit=content_limit),
        publication_service=PublicationService(
            PublicationRepository(), database, default_limit=content_limit
        ),
        newsletter_service=NewsletterService(NewsletterRepository(), database),
        expert_access_service=ExpertAccessService(ExpertAccessRepository(), database, event_bus),
        user_service=UserService(UserRepository(), database, owner_open_id=settings.OWNER_OPEN_ID),
        stats_service=StatsService(
            elite_repo, organization_repo, decision_repo, report_repo, database
        ),
    )


# ---------------------------------------------------------------------------
# Private factory functions
# ---------------------------------------------------------------------------


def _create_database(settings: Settings) -> Database:
    """Create the storage handle; unconfigured when POSTGRES_HOST is unset."""
    uri = settings.SQLALCHEMY_ASYNC_DATABASE_URI
    if uri is None:
        logger.warning("POSTGRES_HOST is not set; running without storage")
    return Database(
        str(uri) if uri is not None else None,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_pool_max_overflow,
        sslmode=settings.POSTGRES_SSLMODE,
    )


def _create_event_bus() -> EventBus:
    """Create the event bus with subscribers wired up.

    - ExpertAccessAuditSubscriber: audit log for expert access events
    """
    bus = InMemoryEventBus()

    audit_subscriber = ExpertAccessAuditSubscriber()
    for pattern in audit_subscriber.EVENT_PATTERNS:
        bus.subscribe(pattern, audit_subscriber.handle)

    return bus
