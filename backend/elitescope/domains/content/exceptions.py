"""Domain exceptions for ungated content."""

from elitescope.core.exceptions import NotFoundException


class PostNotFoundError(NotFoundException):
    """Raised when no post has the requested slug."""

    def __init__(self, slug: str):
        """Initialize with the missing slug."""
        self.slug = slug
        super().__init__(f"Post '{slug}' not found")


class EventNotFoundError(NotFoundException):
    """Raised when an event is not found."""

    def __init__(self, event_id: int):
        """Initialize with the missing id."""
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found")
