"""Configuration enums for type-safe settings.

These enums inherit from str to keep JSON serialization compatible.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments.

    Controls environment-specific behavior like log formatting and CORS origins.
    """

    LOCAL = "local"
    TEST = "test"
    DEV = "dev"
    PRD = "prd"
