"""HTTP API request context.

Extends BaseContext with request-specific fields: authentication metadata,
request tracking and user identity. Only the API layer creates these via
deps.get_context().
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from elitescope import schemas
from elitescope.core.context import BaseContext
from elitescope.core.shared_models import AuthMethod
from elitescope.domains.access.policy import Requester


@dataclass
class ApiContext(BaseContext):
    """Full HTTP request context.

    Created by deps.get_context() and injected into endpoints via Depends().
    """

    # User identity (None for anonymous requests)
    user: Optional[schemas.User] = None

    # Request metadata
    request_id: str = ""

    # Authentication context
    auth_method: AuthMethod = AuthMethod.ANONYMOUS
    auth_metadata: Optional[Dict[str, Any]] = None

    @property
    def is_authenticated(self) -> bool:
        """Whether a user was resolved for this request."""
        return self.user is not None

    @property
    def user_id(self) -> Optional[int]:
        """User ID if available."""
        return self.user.id if self.user else None

    @property
    def requester(self) -> Requester:
        """Access-control view of this request."""
        if self.user is None:
            return Requester.anonymous()
        return Requester(authenticated=True, role=self.user.role, user_id=self.user.id)

    def __str__(self) -> str:
        """String representation for logging."""
        if self.user:
            return (
                f"ApiContext(request_id={self.request_id}, "
                f"method={self.auth_method.value}, user={self.user.id})"
            )
        return f"ApiContext(request_id={self.request_id}, method={self.auth_method.value})"
