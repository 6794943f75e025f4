"""Soft-offline support for read operations.

Read paths are decorated with :func:`degrade_when_unavailable` so that an
unconfigured or unreachable storage backend yields an empty result instead of
an error. Write paths are never decorated and let
:class:`StorageUnavailableException` propagate.
"""

import copy
import functools
from typing import Any, Awaitable, Callable, TypeVar

from elitescope.core.exceptions import StorageUnavailableException
from elitescope.core.logging import logger

T = TypeVar("T")


def degrade_when_unavailable(
    default: Any,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Return ``default`` from the wrapped coroutine when storage is unavailable.

    Mutable defaults are copied per call.

    Args:
        default: Value returned on StorageUnavailableException (e.g. ``[]`` or ``None``).
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except StorageUnavailableException as e:
                logger.warning(f"{func.__qualname__}: storage unavailable, returning empty: {e}")
                return copy.copy(default)

        return wrapper

    return decorator
