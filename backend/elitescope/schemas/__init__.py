"""Schemas for the application."""

from .common import Stats, SuccessResponse
from .content import Event, Post, Publication
from .educational_resource import EducationalResource
from .elite import (
    Elite,
    EliteConnection,
    EliteNetwork,
    EliteOrganization,
    NetworkEdge,
    NetworkNode,
)
from .expert_access import (
    ExpertAccessRequest,
    ExpertAccessRequestCreate,
    ExpertAccessRequestReview,
)
from .health import CheckStatus, DependencyCheck, LivenessResponse, ReadinessResponse
from .newsletter import NewsletterSubscribe, NewsletterSubscription
from .organization import Organization
from .political_decision import PoliticalDecision
from .report import Report
from .user import User, UserUpsert
