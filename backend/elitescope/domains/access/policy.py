"""Access control policy.

Gated content carries an ``access_level``. A requester is mapped to a tier
once, through :data:`ROLE_TIERS`; every visibility decision compares ranks in
:data:`TIER_ORDER`, so anything visible to a lower tier is visible to every
higher tier.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from elitescope.core.exceptions import PermissionException, UnauthorizedException
from elitescope.core.shared_models import AccessLevel, UserRole

TIER_ORDER = (AccessLevel.PUBLIC, AccessLevel.REGISTERED, AccessLevel.EXPERT)

ANONYMOUS_TIER = AccessLevel.PUBLIC

ROLE_TIERS: Dict[UserRole, AccessLevel] = {
    UserRole.GUEST: AccessLevel.REGISTERED,  # any signed-in account reads registered content
    UserRole.USER: AccessLevel.REGISTERED,
    UserRole.EXPERT: AccessLevel.EXPERT,
    UserRole.ADMIN: AccessLevel.EXPERT,
}

_RANK = {level: rank for rank, level in enumerate(TIER_ORDER)}


@dataclass(frozen=True)
class Requester:
    """Who is asking: authentication state, role and (if known) user id."""

    authenticated: bool = False
    role: Optional[UserRole] = None
    user_id: Optional[int] = None

    @classmethod
    def anonymous(cls) -> "Requester":
        """An unauthenticated requester."""
        return cls()

    @property
    def tier(self) -> AccessLevel:
        """Effective access tier of this requester."""
        return effective_tier(self)


def effective_tier(requester: Requester) -> AccessLevel:
    """Map a requester to the highest access level it may read."""
    if not requester.authenticated or requester.role is None:
        return ANONYMOUS_TIER
    return ROLE_TIERS[UserRole(requester.role)]


def visible_levels(tier: AccessLevel) -> FrozenSet[str]:
    """Access levels readable at ``tier`` (used to pre-filter listings)."""
    rank = _RANK[AccessLevel(tier)]
    return frozenset(level.value for level in TIER_ORDER if _RANK[level] <= rank)


def check_item_access(requester: Requester, item_level: str) -> None:
    """Refuse a single gated item the requester may not read.

    Raises:
        UnauthorizedException: The item is above the public tier and the
            requester is not signed in.
        PermissionException: The requester is signed in but its tier is below
            the item's level.
    """
    level = AccessLevel(item_level)
    if _RANK[level] <= _RANK[requester.tier]:
        return
    if not requester.authenticated:
        raise UnauthorizedException(f"Sign in to access {level.value} content")
    raise PermissionException(f"{level.value.capitalize()} access required")


def require_admin(requester: Requester) -> None:
    """Allow only the admin role.

    This is an allow-list, not a tier comparison: experts share the admin
    tier for content but may not administer.
    """
    if not requester.authenticated:
        raise UnauthorizedException()
    if requester.role != UserRole.ADMIN:
        raise PermissionException("Admin access required")
