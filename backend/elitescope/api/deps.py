"""Dependencies that are used in the API endpoints."""

import uuid
from typing import Optional, Tuple, get_type_hints

from fastapi import Depends, Request
from fastapi_auth0 import Auth0User

from elitescope import schemas
from elitescope.api.auth import auth0
from elitescope.api.context import ApiContext
from elitescope.core import container as container_mod
from elitescope.core.config import settings
from elitescope.core.container import Container
from elitescope.core.exceptions import StorageUnavailableException
from elitescope.core.logging import logger
from elitescope.core.shared_models import AuthMethod
from elitescope.domains.users.protocols import UserServiceProtocol


async def _authenticate_system_user(
    user_service: UserServiceProtocol,
) -> Tuple[Optional[schemas.User], AuthMethod, dict]:
    """Resolve the owner account when auth is disabled."""
    if not settings.OWNER_OPEN_ID:
        return None, AuthMethod.ANONYMOUS, {"disabled_auth": True}
    user = await user_service.get_by_open_id(settings.OWNER_OPEN_ID)
    if user:
        return user, AuthMethod.SYSTEM, {"disabled_auth": True}
    return None, AuthMethod.ANONYMOUS, {"disabled_auth": True}


async def _authenticate_auth0_user(
    user_service: UserServiceProtocol, auth0_user: Auth0User
) -> Tuple[Optional[schemas.User], AuthMethod, dict]:
    """Upsert the user behind a validated Auth0 token.

    When storage is unavailable the request continues without a user, so
    public reads keep working.
    """
    auth_metadata = {"auth0_id": auth0_user.id}
    # Access tokens usually carry no email claim
    profile = {"email": auth0_user.email} if auth0_user.email else {}
    try:
        user = await user_service.upsert(
            schemas.UserUpsert(
                open_id=auth0_user.id,
                login_method=AuthMethod.AUTH0.value,
                **profile,
            )
        )
    except StorageUnavailableException as e:
        logger.warning(f"Could not resolve user {auth0_user.id}: {e}")
        return None, AuthMethod.AUTH0, auth_metadata
    return user, AuthMethod.AUTH0, auth_metadata


def get_container() -> Container:
    """Get the DI container. Initialized at startup."""
    c = container_mod.container
    if c is None:
        raise RuntimeError("Container not initialized. Call initialize_container() first.")
    return c


# ---------------------------------------------------------------------------
# Protocol Injection
# ---------------------------------------------------------------------------

# Cache of protocol_type → Container field name, built once at first call.
_INJECT_CACHE: dict[type, str] = {}


def _resolve_field_name(protocol_type: type) -> str:
    """Find which Container field matches the given protocol type."""
    if not _INJECT_CACHE:
        for name, hint in get_type_hints(Container).items():
            _INJECT_CACHE[hint] = name

    field_name = _INJECT_CACHE.get(protocol_type)
    if field_name is None:
        available = list(_INJECT_CACHE.values())
        raise TypeError(
            f"No binding for {protocol_type.__name__} in Container. Available fields: {available}"
        )
    return field_name


def Inject(protocol_type: type):  # noqa: N802 - uppercase to match FastAPI convention
    """Resolve a protocol implementation from the DI container.

    Works like ``Depends()`` but looks up the implementation by protocol type::

        @router.get("/")
        async def list(reports: ReportServiceProtocol = Inject(ReportServiceProtocol)):
            ...
    """
    field_name = _resolve_field_name(protocol_type)

    def _resolve(c: Container = Depends(get_container)):
        return getattr(c, field_name)

    return Depends(_resolve)


async def get_context(
    request: Request,
    auth0_user: Optional[Auth0User] = Depends(auth0.get_user),
    c: Container = Depends(get_container),
) -> ApiContext:
    """Create the API context for the request.

    Anonymous requests are allowed; endpoints decide what an anonymous
    requester may see.

    Args:
    ----
        request (Request): The FastAPI request object.
        auth0_user (Optional[Auth0User]): User details from Auth0, if a valid token was sent.
        c (Container): The DI container.

    Returns:
    -------
        ApiContext: API context with identity and a request-scoped logger.
    """
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))

    if not settings.AUTH_ENABLED:
        user, auth_method, auth_metadata = await _authenticate_system_user(c.user_service)
    elif auth0_user:
        user, auth_method, auth_metadata = await _authenticate_auth0_user(
            c.user_service, auth0_user
        )
    else:
        user, auth_method, auth_metadata = None, AuthMethod.ANONYMOUS, {}

    base_logger = logger.with_context(
        request_id=request_id,
        auth_method=auth_method.value,
        context_base="api",
    )
    if user:
        base_logger = base_logger.with_context(user_id=str(user.id), user_role=user.role.value)

    ctx = ApiContext(
        request_id=request_id,
        user=user,
        auth_method=auth_method,
        auth_metadata=auth_metadata,
        logger=base_logger,
    )
    request.state.api_context = ctx
    return ctx
