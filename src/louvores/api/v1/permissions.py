"""Permission endpoints."""

from fastapi import APIRouter

from src.louvores.api.dependencies import ResolvedPermissions
from src.louvores.core.permissions import role_label
from src.louvores.schemas.permission import AccessUser, PermissionFlags, PermissionsResponse

router = APIRouter(prefix="/permissoes", tags=["permissions"])


@router.get(
    "/me",
    response_model=PermissionsResponse,
    summary="Current account permissions",
)
async def my_permissions(permissions: ResolvedPermissions) -> PermissionsResponse:
    record = permissions.record
    user = None
    if record is not None:
        user = AccessUser(
            id=record.id,
            person_id=record.person_id,
            email=record.email,
            name=record.name,
            role=record.role,
            role_label=role_label(record.role),
            active=record.active,
        )
    return PermissionsResponse(
        success=permissions.error is None,
        usuario=user,
        error=permissions.error,  # type: ignore[arg-type]
        permissoes=PermissionFlags(**permissions.flags),
    )
