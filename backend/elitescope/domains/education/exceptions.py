"""Domain exceptions for educational resources."""

from elitescope.core.exceptions import NotFoundException


class EducationalResourceNotFoundError(NotFoundException):
    """Raised when an educational resource is not found."""

    def __init__(self, resource_id: int):
        """Initialize with the missing id."""
        self.resource_id = resource_id
        super().__init__(f"Educational resource {resource_id} not found")
