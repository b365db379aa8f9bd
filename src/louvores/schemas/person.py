"""People registry schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.louvores.core.permissions import role_label
from src.louvores.core.phone import format_phone_number
from src.louvores.models import Person, RoleTag
from src.louvores.schemas.tag import TagRead


class PersonCreateRequest(BaseModel):
    name: str | None = Field(default=None, max_length=150)
    role: str | None = Field(default=None, max_length=50)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=30)
    active: bool = True
    photo_url: str | None = Field(default=None, max_length=500)
    notes: str | None = None


class PersonUpdateRequest(BaseModel):
    """Partial update; only fields present in the body are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=150)
    role: str | None = Field(default=None, max_length=50)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=30)
    active: bool | None = None
    photo_url: str | None = Field(default=None, max_length=500)
    notes: str | None = None


class PersonRead(BaseModel):
    id: UUID
    name: str
    role: str
    role_label: str
    email: str | None
    phone: str | None
    phone_formatted: str
    active: bool
    has_access: bool
    account_id: UUID | None
    photo_url: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
    tags: list[TagRead] = []

    @classmethod
    def from_model(cls, person: Person, tags: list[RoleTag] | None = None) -> "PersonRead":
        return cls(
            id=person.id,
            name=person.name,
            role=person.role,
            role_label=role_label(person.role),
            email=person.email,
            phone=person.phone,
            phone_formatted=format_phone_number(person.phone),
            active=person.active,
            has_access=person.has_access,
            account_id=person.account_id,
            photo_url=person.photo_url,
            notes=person.notes,
            created_at=person.created_at,
            updated_at=person.updated_at,
            tags=[TagRead.model_validate(tag) for tag in tags or []],
        )


class PersonResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: PersonRead


class PersonListResponse(BaseModel):
    success: bool = True
    data: list[PersonRead]
    count: int


class PersonDeleteResponse(BaseModel):
    success: bool = True
    message: str
