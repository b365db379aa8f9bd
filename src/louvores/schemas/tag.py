"""Skill tag schemas."""

from uuid import UUID

from pydantic import BaseModel


class TagRead(BaseModel):
    id: UUID
    name: str
    category: str
    color: str | None = None
    icon: str | None = None
    display_order: int = 0

    model_config = {"from_attributes": True}


class TagCategoryGroup(BaseModel):
    category: str
    tags: list[TagRead]


class TagListResponse(BaseModel):
    success: bool = True
    data: list[TagCategoryGroup]


class TagToggleResponse(BaseModel):
    success: bool = True
    assigned: bool
