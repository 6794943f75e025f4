"""Shared exceptions module."""

from typing import Optional

from pydantic import ValidationError


class EliteScopeException(Exception):
    """Base exception for Elitescope services."""

    pass


class PermissionException(EliteScopeException):
    """Exception raised when a user does not have the necessary permissions to perform an action."""

    def __init__(
        self,
        message: Optional[str] = "User does not have the right to perform this action",
    ):
        """Create a new PermissionException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class UnauthorizedException(EliteScopeException):
    """Exception raised when an action requires an authenticated requester."""

    def __init__(self, message: Optional[str] = "Authentication required"):
        """Create a new UnauthorizedException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class NotFoundException(EliteScopeException):
    """Exception raised when an object is not found."""

    def __init__(self, message: Optional[str] = "Object not found"):
        """Create a new NotFoundException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class StorageUnavailableException(EliteScopeException):
    """Raised when the storage backend is not configured or cannot be reached."""

    def __init__(self, message: Optional[str] = "Storage backend is unavailable"):
        """Create a new StorageUnavailableException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class ConflictException(EliteScopeException):
    """Raised when a write conflicts with the current state of a resource."""

    def __init__(self, message: Optional[str] = "Resource is in a conflicting state"):
        """Create a new ConflictException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


def unpack_validation_error(exc: ValidationError) -> dict:
    """Unpack a Pydantic validation error into a dictionary.

    Args:
    ----
        exc (ValidationError): The Pydantic validation error.

    Returns:
    -------
        dict: The dictionary representation of the validation error.

    """
    error_messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        message = error["msg"]
        error_messages.append({field: message})

    return {"errors": error_messages}
