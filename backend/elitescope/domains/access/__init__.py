"""Access control: requester tiers and gated-content rules."""

from elitescope.domains.access.policy import (
    ROLE_TIERS,
    Requester,
    check_item_access,
    effective_tier,
    require_admin,
    visible_levels,
)

__all__ = [
    "ROLE_TIERS",
    "Requester",
    "check_item_access",
    "effective_tier",
    "require_admin",
    "visible_levels",
]
