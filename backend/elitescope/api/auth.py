"""Auth0 integration.

With ``AUTH_ENABLED`` the bearer token is validated by fastapi-auth0 and
``auth0.get_user`` yields the token's user (or None without a token). With
auth disabled a stand-in with the same dependency shape always yields None.
"""

from typing import Optional

from fastapi_auth0 import Auth0, Auth0User

from elitescope.core.config import settings


class _DisabledAuth0:
    """Stand-in used when authentication is disabled."""

    async def get_user(self) -> Optional[Auth0User]:
        """No token is ever validated."""
        return None


if settings.AUTH_ENABLED:
    auth0 = Auth0(
        domain=settings.AUTH0_DOMAIN,
        api_audience=settings.AUTH0_AUDIENCE,
        auto_error=False,
    )
else:
    auth0 = _DisabledAuth0()
