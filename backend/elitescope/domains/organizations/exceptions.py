"""Domain exceptions for organizations."""

from elitescope.core.exceptions import NotFoundException


class OrganizationNotFoundError(NotFoundException):
    """Raised when an organization is not found."""

    def __init__(self, organization_id: int):
        """Initialize with the missing id."""
        self.organization_id = organization_id
        super().__init__(f"Organization {organization_id} not found")
