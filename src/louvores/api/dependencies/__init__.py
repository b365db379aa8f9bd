"""FastAPI dependency injection definitions."""

from src.louvores.api.dependencies.auth import (
    CurrentAccount,
    ResolvedPermissions,
    UserManager,
    get_current_account,
    get_resolved_permissions,
    require_capability,
)
from src.louvores.api.dependencies.db import DBSession, get_db_session
from src.louvores.api.dependencies.repositories import (
    AccessRecordRepo,
    InvitationRepo,
    PersonRepo,
    PersonTagRepo,
    RoleTagRepo,
    ScheduleRepo,
    SongRepo,
)
from src.louvores.api.dependencies.services import (
    IdentityClientDep,
    InvitationServiceDep,
    PermissionServiceDep,
    PersonServiceDep,
    PolicyDep,
    ScheduleServiceDep,
    TagServiceDep,
    get_invitation_service,
    get_permission_service,
    get_person_service,
    get_schedule_service,
    get_tag_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentAccount",
    "ResolvedPermissions",
    "UserManager",
    "get_current_account",
    "get_resolved_permissions",
    "require_capability",
    # Repositories
    "AccessRecordRepo",
    "InvitationRepo",
    "PersonRepo",
    "PersonTagRepo",
    "RoleTagRepo",
    "ScheduleRepo",
    "SongRepo",
    # Services
    "IdentityClientDep",
    "InvitationServiceDep",
    "PermissionServiceDep",
    "PersonServiceDep",
    "PolicyDep",
    "ScheduleServiceDep",
    "TagServiceDep",
    "get_invitation_service",
    "get_permission_service",
    "get_person_service",
    "get_schedule_service",
    "get_tag_service",
]
