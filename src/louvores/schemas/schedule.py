"""Schedule view schemas."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel


class ScheduledFunctionView(BaseModel):
    id: UUID
    tag_id: UUID | None
    tag_name: str
    category: str
    color: str
    person_id: UUID | None
    person_name: str
    person_email: str
    display_order: int
    confirmed: bool


class CategoryGroup(BaseModel):
    category: str
    label: str
    functions: list[ScheduledFunctionView]


class SongView(BaseModel):
    id: UUID
    name: str
    tags: list[str]
    youtube_url: str | None
    spotify_url: str | None
    display_order: int


class ScheduleView(BaseModel):
    id: UUID
    service_date: date
    title: str
    status: str
    groups: list[CategoryGroup]
    songs: list[SongView]
    total_assigned: int
    total_confirmed: int


class ScheduleResponse(BaseModel):
    success: bool = True
    escala: ScheduleView | None
