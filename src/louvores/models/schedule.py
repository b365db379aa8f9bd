"""Service schedules and their assigned functions."""

from datetime import date
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.louvores.models.enums import ScheduleStatus


class Schedule(SQLModel, table=True):
    """Roster for one service date."""

    __tablename__ = "schedules"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    service_date: date = Field(unique=True, index=True)
    title: str = Field(max_length=200)
    status: str = Field(default=ScheduleStatus.DRAFT.value, max_length=20)
    service_id: UUID | None = Field(default=None, index=True)


class ScheduledFunction(SQLModel, table=True):
    """Assignment of a person to a function (tag) within a schedule."""

    __tablename__ = "scheduled_functions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    schedule_id: UUID = Field(foreign_key="schedules.id", ondelete="CASCADE", index=True)
    tag_id: UUID | None = Field(default=None, foreign_key="role_tags.id", ondelete="SET NULL")
    person_id: UUID | None = Field(
        default=None, foreign_key="people.id", ondelete="SET NULL", index=True
    )
    display_order: int = Field(default=0)
    confirmed: bool = Field(default=False)
