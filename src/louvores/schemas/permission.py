"""Permission schemas."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel

PermissionErrorState = Literal["not_provisioned", "deactivated"]


class AccessUser(BaseModel):
    """Access record as exposed to the client (possibly synthetic)."""

    id: UUID
    person_id: UUID | None
    email: str
    name: str
    role: str
    role_label: str
    active: bool


class PermissionFlags(BaseModel):
    can_access_admin: bool = False
    can_manage_users: bool = False
    can_manage_schedules: bool = False
    can_manage_content: bool = False
    is_super_admin: bool = False


class PermissionsResponse(BaseModel):
    success: bool
    usuario: AccessUser | None = None
    error: PermissionErrorState | None = None
    permissoes: PermissionFlags
