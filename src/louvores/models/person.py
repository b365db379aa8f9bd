"""People registry and the access records that gate the admin area."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.louvores.models.base import utc_now
from src.louvores.models.enums import Role


class Person(SQLModel, table=True):
    """Member of the congregation.

    A person without ``has_access`` is a "ghost" record: it can be scheduled
    and invited, but has no login.
    """

    __tablename__ = "people"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=150)
    role: str = Field(default=Role.MEMBER.value, max_length=50)
    email: str | None = Field(default=None, max_length=255, unique=True, index=True)
    phone: str | None = Field(default=None, max_length=20)
    active: bool = Field(default=True)
    has_access: bool = Field(default=False)
    account_id: UUID | None = Field(default=None, unique=True, index=True)
    photo_url: str | None = Field(default=None, max_length=500)
    notes: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class AccessRecord(SQLModel, table=True):
    """Authorization record keyed by the identity-provider account id."""

    __tablename__ = "access_records"

    id: UUID = Field(primary_key=True)
    person_id: UUID | None = Field(
        default=None, foreign_key="people.id", ondelete="SET NULL", index=True
    )
    email: str = Field(max_length=255, index=True)
    name: str = Field(max_length=150)
    role: str = Field(default=Role.MEMBER.value, max_length=50)
    phone: str | None = Field(default=None, max_length=20)
    active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
