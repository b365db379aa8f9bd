"""Skill tag endpoints."""

from uuid import UUID

from fastapi import APIRouter

from src.louvores.api.dependencies import (
    CurrentAccount,
    PersonRepo,
    ResolvedPermissions,
    TagServiceDep,
)
from src.louvores.core.exceptions import PermissionDeniedError
from src.louvores.core.permissions import Capability
from src.louvores.schemas.tag import TagCategoryGroup, TagListResponse, TagRead, TagToggleResponse

router = APIRouter(tags=["tags"])


@router.get("/tags", response_model=TagListResponse, summary="List active skill tags")
async def list_tags(account: CurrentAccount, tag_service: TagServiceDep) -> TagListResponse:
    groups = await tag_service.list_grouped()
    return TagListResponse(
        data=[
            TagCategoryGroup(category=category, tags=[TagRead.model_validate(t) for t in tags])
            for category, tags in groups
        ]
    )


@router.post(
    "/pessoas/{person_id}/tags/{tag_id}/toggle",
    response_model=TagToggleResponse,
    summary="Toggle a skill tag on a person",
    description="Allowed for user managers, or for an account on its own person record.",
)
async def toggle_tag(
    person_id: UUID,
    tag_id: UUID,
    account: CurrentAccount,
    permissions: ResolvedPermissions,
    person_repo: PersonRepo,
    tag_service: TagServiceDep,
) -> TagToggleResponse:
    if not permissions.has(Capability.MANAGE_USERS):
        own = await person_repo.get_by_account_id(account.id)
        if permissions.error is not None or own is None or own.id != person_id:
            raise PermissionDeniedError("Você não tem permissão para esta ação")

    assigned = await tag_service.toggle(person_id, tag_id)
    return TagToggleResponse(assigned=assigned)
