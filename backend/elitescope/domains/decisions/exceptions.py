"""Domain exceptions for political decisions."""

from elitescope.core.exceptions import NotFoundException


class DecisionNotFoundError(NotFoundException):
    """Raised when a political decision is not found."""

    def __init__(self, decision_id: int):
        """Initialize with the missing id."""
        self.decision_id = decision_id
        super().__init__(f"Political decision {decision_id} not found")
