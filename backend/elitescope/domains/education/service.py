"""Education service."""

from typing import List, Optional

from elitescope import schemas
from elitescope.domains.access.gated import GatedContentService
from elitescope.domains.access.policy import Requester
from elitescope.domains.education.exceptions import EducationalResourceNotFoundError
from elitescope.domains.education.protocols import EducationServiceProtocol


class EducationService(
    GatedContentService[schemas.EducationalResource], EducationServiceProtocol
):
    """Domain service for educational resources."""

    resource = "education"
    schema = schemas.EducationalResource
    not_found = EducationalResourceNotFoundError

    async def list(
        self,
        requester: Requester,
        *,
        resource_type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.EducationalResource]:
        """Resources at or below the requester's tier, newest first."""
        filters = self._filters({"resource_type": resource_type}, limit, offset)
        return await self._list_visible(requester, filters)

    async def get(self, requester: Requester, resource_id: int) -> schemas.EducationalResource:
        """Get a resource the requester is allowed to read."""
        return await self._get_checked(requester, resource_id)
