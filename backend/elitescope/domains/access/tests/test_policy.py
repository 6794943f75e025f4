"""Unit tests for the access control policy."""

import pytest

from elitescope.core.exceptions import PermissionException, UnauthorizedException
from elitescope.core.shared_models import AccessLevel, UserRole
from elitescope.domains.access.policy import (
    TIER_ORDER,
    Requester,
    check_item_access,
    effective_tier,
    require_admin,
    visible_levels,
)

ANONYMOUS = Requester.anonymous()


def _signed_in(role: UserRole) -> Requester:
    return Requester(authenticated=True, role=role, user_id=7)


class TestEffectiveTier:
    def test_anonymous_is_public(self):
        assert effective_tier(ANONYMOUS) == AccessLevel.PUBLIC

    def test_authenticated_without_role_is_public(self):
        assert effective_tier(Requester(authenticated=True)) == AccessLevel.PUBLIC

    @pytest.mark.parametrize(
        "role, tier",
        [
            (UserRole.GUEST, AccessLevel.REGISTERED),
            (UserRole.USER, AccessLevel.REGISTERED),
            (UserRole.EXPERT, AccessLevel.EXPERT),
            (UserRole.ADMIN, AccessLevel.EXPERT),
        ],
    )
    def test_role_maps_to_tier(self, role, tier):
        assert _signed_in(role).tier == tier

    def test_accepts_role_as_plain_string(self):
        assert effective_tier(Requester(authenticated=True, role="expert")) == AccessLevel.EXPERT


class TestVisibleLevels:
    def test_public(self):
        assert visible_levels(AccessLevel.PUBLIC) == {"public"}

    def test_registered(self):
        assert visible_levels(AccessLevel.REGISTERED) == {"public", "registered"}

    def test_expert(self):
        assert visible_levels(AccessLevel.EXPERT) == {"public", "registered", "expert"}

    def test_monotonic(self):
        """Anything visible at a lower tier stays visible at every higher tier."""
        for lower, higher in zip(TIER_ORDER, TIER_ORDER[1:]):
            assert visible_levels(lower) < visible_levels(higher)


class TestCheckItemAccess:
    @pytest.mark.parametrize(
        "requester, level, expected",
        [
            (ANONYMOUS, "public", None),
            (ANONYMOUS, "registered", UnauthorizedException),
            (ANONYMOUS, "expert", UnauthorizedException),
            (_signed_in(UserRole.GUEST), "registered", None),
            (_signed_in(UserRole.USER), "public", None),
            (_signed_in(UserRole.USER), "registered", None),
            (_signed_in(UserRole.USER), "expert", PermissionException),
            (_signed_in(UserRole.EXPERT), "expert", None),
            (_signed_in(UserRole.ADMIN), "expert", None),
        ],
    )
    def test_matrix(self, requester, level, expected):
        if expected is None:
            check_item_access(requester, level)
        else:
            with pytest.raises(expected):
                check_item_access(requester, level)

    def test_unknown_level_is_rejected(self):
        with pytest.raises(ValueError):
            check_item_access(_signed_in(UserRole.ADMIN), "secret")


class TestRequireAdmin:
    def test_admin_passes(self):
        require_admin(_signed_in(UserRole.ADMIN))

    def test_anonymous_is_unauthorized(self):
        with pytest.raises(UnauthorizedException):
            require_admin(ANONYMOUS)

    @pytest.mark.parametrize("role", [UserRole.GUEST, UserRole.USER, UserRole.EXPERT])
    def test_other_roles_are_forbidden(self, role):
        with pytest.raises(PermissionException):
            require_admin(_signed_in(role))
