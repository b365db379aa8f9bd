"""Skill tags (functions a person can perform in a service)."""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class RoleTag(SQLModel, table=True):
    __tablename__ = "role_tags"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    category: str = Field(max_length=50, index=True)
    color: str | None = Field(default=None, max_length=20)
    icon: str | None = Field(default=None, max_length=50)
    display_order: int = Field(default=0)
    active: bool = Field(default=True)


class PersonTag(SQLModel, table=True):
    """Association between a person and a skill tag."""

    __tablename__ = "person_tags"

    person_id: UUID = Field(foreign_key="people.id", ondelete="CASCADE", primary_key=True)
    tag_id: UUID = Field(foreign_key="role_tags.id", ondelete="CASCADE", primary_key=True)
    skill_level: int = Field(default=1)
