"""Domain exceptions for elites."""

from elitescope.core.exceptions import NotFoundException


class EliteNotFoundError(NotFoundException):
    """Raised when an elite is not found."""

    def __init__(self, elite_id: int):
        """Initialize with the missing id."""
        self.elite_id = elite_id
        super().__init__(f"Elite {elite_id} not found")
