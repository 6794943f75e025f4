"""Domain exceptions for expert access requests."""

from elitescope.core.exceptions import ConflictException, NotFoundException


class ExpertAccessRequestNotFoundError(NotFoundException):
    """Raised when an expert access request is not found."""

    def __init__(self, request_id: int):
        """Initialize with the missing id."""
        self.request_id = request_id
        super().__init__(f"Expert access request {request_id} not found")


class ExpertAccessRequestAlreadyReviewedError(ConflictException):
    """Raised when reviewing a request that is no longer pending."""

    def __init__(self, request_id: int, status: str):
        """Initialize with the request id and its current status."""
        self.request_id = request_id
        self.status = status
        super().__init__(f"Expert access request {request_id} was already {status}")
