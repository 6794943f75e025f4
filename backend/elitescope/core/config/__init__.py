"""Configuration module for the Elitescope backend.

Usage:
    from elitescope.core.config import settings, Environment

    if settings.ENVIRONMENT == Environment.PRD:
        ...
"""

from elitescope.core.config.enums import Environment
from elitescope.core.config.settings import Settings

__all__ = [
    "Settings",
    "Environment",
    "settings",
]

# Singleton settings instance
settings = Settings()
