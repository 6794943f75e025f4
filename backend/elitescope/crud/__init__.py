"""CRUD singletons, one per entity."""

from .crud_content import event, post, publication
from .crud_educational_resource import educational_resource
from .crud_elite import elite
from .crud_elite_connection import dedupe_by_id, elite_connection
from .crud_elite_organization import elite_organization
from .crud_expert_access_request import expert_access_request
from .crud_newsletter_subscription import newsletter_subscription
from .crud_organization import organization
from .crud_political_decision import political_decision
from .crud_report import report
from .crud_user import user
