"""Dependency Injection Container.

The container is an immutable dataclass holding protocol implementations.
It has no construction logic; that belongs in the factory. Tests construct it
directly with fakes.
"""

from dataclasses import dataclass, replace
from typing import Any

from elitescope.core.health.protocols import HealthServiceProtocol
from elitescope.core.protocols import AccessMetrics, EventBus, HttpMetrics, MetricsRenderer
from elitescope.db.session import Database
from elitescope.domains.content.protocols import (
    EventServiceProtocol,
    PostServiceProtocol,
    PublicationServiceProtocol,
)
from elitescope.domains.decisions.protocols import DecisionServiceProtocol
from elitescope.domains.education.protocols import EducationServiceProtocol
from elitescope.domains.elites.protocols import EliteServiceProtocol
from elitescope.domains.expert_access.protocols import ExpertAccessServiceProtocol
from elitescope.domains.newsletter.protocols import NewsletterServiceProtocol
from elitescope.domains.organizations.protocols import OrganizationServiceProtocol
from elitescope.domains.reports.protocols import ReportServiceProtocol
from elitescope.domains.stats.protocols import StatsServiceProtocol
from elitescope.domains.users.protocols import UserServiceProtocol


@dataclass(frozen=True)
class Container:
    """Immutable container holding all protocol implementations.

    Usage:
        # FastAPI endpoints: use Inject() to pull individual protocols
        from elitescope.api.deps import Inject
        async def list_reports(reports: ReportServiceProtocol = Inject(ReportServiceProtocol)):
            ...
    """

    # Storage handle (owns the engines)
    database: Database

    # Health service: readiness check facade
    health: HealthServiceProtocol

    # Event bus for domain event fan-out
    event_bus: EventBus

    # Metrics
    http_metrics: HttpMetrics
    access_metrics: AccessMetrics
    metrics_renderer: MetricsRenderer

    # Catalog
    elite_service: EliteServiceProtocol
    organization_service: OrganizationServiceProtocol
    decision_service: DecisionServiceProtocol

    # Gated content
    report_service: ReportServiceProtocol
    education_service: EducationServiceProtocol

    # Ungated content
    post_service: PostServiceProtocol
    event_service: EventServiceProtocol
    publication_service: PublicationServiceProtocol

    # Writes
    newsletter_service: NewsletterServiceProtocol
    expert_access_service: ExpertAccessServiceProtocol
    user_service: UserServiceProtocol

    stats_service: StatsServiceProtocol

    def replace(self, **changes: Any) -> "Container":
        """Create a new container with some dependencies replaced.

            modified = container.replace(event_bus=FakeEventBus())
        """
        return replace(self, **changes)
