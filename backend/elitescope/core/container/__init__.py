"""Dependency Injection Container Module.

This module provides the DI container and factory for wiring dependencies
across the application.

Usage:
------
    # Initialize at startup (call once from main.py)
    from elitescope.core.container import initialize_container
    from elitescope.core.config import settings
    initialize_container(settings)

    # In FastAPI deps.py
    from elitescope.core import container as container_mod
    def get_container() -> Container:
        return container_mod.container

    # In tests (construct directly with fakes, don't use global)
    from elitescope.core.container import Container
    test_container = Container(database=FakeDatabase(), ...)

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_container() (builds)
"""

from typing import TYPE_CHECKING

from elitescope.core.container.container import Container
from elitescope.core.container.factory import create_container

if TYPE_CHECKING:
    from elitescope.core.config import Settings

__all__ = ["Container", "create_container", "container", "initialize_container"]


# ---------------------------------------------------------------------------
# Global container instance
# ---------------------------------------------------------------------------

container: Container | None = None
"""Global container instance, set by `initialize_container()` at startup.

Do NOT import this in domain code. Domains receive dependencies through
their constructors.
"""


def initialize_container(settings: "Settings") -> None:
    """Initialize the global container. Call once at startup.

    Args:
        settings: Application settings from core/config

    Raises:
        RuntimeError: If the container is already initialized
    """
    global container

    if container is not None:
        raise RuntimeError(
            "Container already initialized. "
            "initialize_container() should only be called once at startup."
        )

    container = create_container(settings)


def reset_container() -> None:
    """Reset the global container to None. For testing and shutdown only."""
    global container
    container = None
