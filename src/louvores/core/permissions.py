"""Role-based permission policy.

Roles map to capabilities through static tables. Accounts whose email is on
the super-admin allow-list hold every capability regardless of role.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache

from src.louvores.core.config import get_settings
from src.louvores.models.enums import Role


class Capability(str, Enum):
    ACCESS_ADMIN = "can_access_admin"
    MANAGE_USERS = "can_manage_users"
    MANAGE_SCHEDULES = "can_manage_schedules"
    MANAGE_CONTENT = "can_manage_content"


_ADMIN_AREA_ROLES = frozenset(
    {Role.PASTOR, Role.ELDER, Role.MUSICIAN, Role.SEMINARIAN, Role.STAFF, Role.ADMIN}
)

DEFAULT_CAPABILITY_TABLE: dict[Capability, frozenset[Role]] = {
    Capability.ACCESS_ADMIN: _ADMIN_AREA_ROLES,
    Capability.MANAGE_USERS: frozenset({Role.ADMIN}),
    Capability.MANAGE_SCHEDULES: frozenset({Role.PASTOR, Role.ELDER, Role.STAFF, Role.ADMIN}),
    Capability.MANAGE_CONTENT: _ADMIN_AREA_ROLES,
}

ROLE_LABELS: dict[Role, str] = {
    Role.MEMBER: "Membro",
    Role.PASTOR: "Pastor",
    Role.SEMINARIAN: "Seminarista",
    Role.ELDER: "Presbítero",
    Role.STAFF: "Staff",
    Role.MUSICIAN: "Músico",
    Role.ADMIN: "Administrador",
}


def parse_role(value: str | None) -> Role | None:
    """Return the Role for a stored value, or None when it is unknown."""
    if value is None:
        return None
    try:
        return Role(value)
    except ValueError:
        return None


def role_label(value: str | None) -> str:
    role = parse_role(value)
    if role is None:
        return value or ""
    return ROLE_LABELS[role]


@dataclass(frozen=True)
class PermissionPolicy:
    """Immutable permission configuration.

    Roles that are not in the tables (or missing) grant nothing.
    """

    super_admin_emails: frozenset[str] = frozenset()
    table: dict[Capability, frozenset[Role]] = field(
        default_factory=lambda: dict(DEFAULT_CAPABILITY_TABLE)
    )

    def is_super_admin(self, email: str | None) -> bool:
        if not email:
            return False
        return email.strip().lower() in self.super_admin_emails

    def has(self, capability: Capability, role: str | None, email: str | None = None) -> bool:
        if self.is_super_admin(email):
            return True
        parsed = parse_role(role)
        if parsed is None:
            return False
        return parsed in self.table.get(capability, frozenset())

    def can_access_admin(self, role: str | None, email: str | None = None) -> bool:
        return self.has(Capability.ACCESS_ADMIN, role, email)

    def can_manage_users(self, role: str | None, email: str | None = None) -> bool:
        return self.has(Capability.MANAGE_USERS, role, email)

    def can_manage_schedules(self, role: str | None, email: str | None = None) -> bool:
        return self.has(Capability.MANAGE_SCHEDULES, role, email)

    def can_manage_content(self, role: str | None, email: str | None = None) -> bool:
        return self.has(Capability.MANAGE_CONTENT, role, email)

    def capabilities(self, role: str | None, email: str | None = None) -> dict[str, bool]:
        """Flag map of every capability plus ``is_super_admin``."""
        flags = {capability.value: self.has(capability, role, email) for capability in Capability}
        flags["is_super_admin"] = self.is_super_admin(email)
        return flags


@lru_cache
def get_permission_policy() -> PermissionPolicy:
    settings = get_settings()
    return PermissionPolicy(super_admin_emails=frozenset(settings.super_admin_emails))
