"""Models for the application."""

from ._base import Base
from .educational_resource import EducationalResource
from .elite import Elite
from .elite_connection import EliteConnection
from .elite_organization import EliteOrganization
from .event import Event
from .expert_access_request import ExpertAccessRequest
from .newsletter_subscription import NewsletterSubscription
from .organization import Organization
from .political_decision import PoliticalDecision
from .post import Post
from .publication import Publication
from .report import Report
from .user import User
