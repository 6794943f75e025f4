"""Shared models for the backend."""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user account."""

    GUEST = "guest"
    USER = "user"
    EXPERT = "expert"
    ADMIN = "admin"


class AccessLevel(str, Enum):
    """Visibility tier of a piece of gated content."""

    PUBLIC = "public"
    REGISTERED = "registered"
    EXPERT = "expert"


class ExpertAccessStatus(str, Enum):
    """Expert access request status enum."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ConnectionType(str, Enum):
    """Kind of relationship between two elites."""

    PROFESSIONAL = "Professional"
    POLITICAL = "Political"
    FINANCIAL = "Financial"
    PERSONAL = "Personal"


class EventStatus(str, Enum):
    """Event status enum."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class YesNo(str, Enum):
    """Stored boolean flag ("yes"/"no")."""

    YES = "yes"
    NO = "no"


class AuthMethod(str, Enum):
    """How the requester of an API call was identified."""

    AUTH0 = "auth0"
    SYSTEM = "system"
    ANONYMOUS = "anonymous"
