"""Tests for the role/capability policy."""

import pytest

from src.louvores.core.permissions import (
    Capability,
    PermissionPolicy,
    get_permission_policy,
    parse_role,
    role_label,
)
from src.louvores.models import Role

pytestmark = pytest.mark.unit


@pytest.fixture
def policy() -> PermissionPolicy:
    return PermissionPolicy(super_admin_emails=frozenset({"root@louvores.app"}))


class TestCapabilityTable:
    def test_member_has_nothing(self, policy: PermissionPolicy):
        flags = policy.capabilities(Role.MEMBER.value, "membro@example.com")
        assert flags == {
            "can_access_admin": False,
            "can_manage_users": False,
            "can_manage_schedules": False,
            "can_manage_content": False,
            "is_super_admin": False,
        }

    def test_admin_has_everything_but_super_admin(self, policy: PermissionPolicy):
        flags = policy.capabilities(Role.ADMIN.value, "admin@example.com")
        assert all(flags[c.value] for c in Capability)
        assert flags["is_super_admin"] is False

    @pytest.mark.parametrize("role", [Role.PASTOR, Role.ELDER, Role.STAFF])
    def test_schedule_managers(self, policy: PermissionPolicy, role: Role):
        assert policy.can_manage_schedules(role.value)
        assert policy.can_access_admin(role.value)
        assert not policy.can_manage_users(role.value)

    @pytest.mark.parametrize("role", [Role.MUSICIAN, Role.SEMINARIAN])
    def test_content_only_roles(self, policy: PermissionPolicy, role: Role):
        assert policy.can_access_admin(role.value)
        assert policy.can_manage_content(role.value)
        assert not policy.can_manage_schedules(role.value)
        assert not policy.can_manage_users(role.value)

    @pytest.mark.parametrize("role", [None, "", "bispo"])
    def test_unknown_role_grants_nothing(self, policy: PermissionPolicy, role):
        assert not any(policy.has(c, role) for c in Capability)


class TestSuperAdmin:
    def test_allow_list_is_case_insensitive(self, policy: PermissionPolicy):
        assert policy.is_super_admin("ROOT@Louvores.App")
        assert policy.is_super_admin("  root@louvores.app ")
        assert not policy.is_super_admin(None)

    def test_super_admin_overrides_role(self, policy: PermissionPolicy):
        flags = policy.capabilities(Role.MEMBER.value, "Root@louvores.app")
        assert all(flags.values())

    def test_policy_from_settings_normalizes_emails(self):
        """SUPER_ADMIN_EMAILS is set with mixed case in the test environment."""
        get_permission_policy.cache_clear()
        assert get_permission_policy().is_super_admin("root@louvores.app")


class TestRoles:
    def test_parse_role(self):
        assert parse_role("presbitero") is Role.ELDER
        assert parse_role("Presbitero") is None

    def test_role_label_falls_back_to_raw_value(self):
        assert role_label("musico") == "Músico"
        assert role_label("bispo") == "bispo"
        assert role_label(None) == ""
