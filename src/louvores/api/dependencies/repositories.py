"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.louvores.api.dependencies.db import DBSession
from src.louvores.repositories import (
    AccessRecordRepository,
    InvitationRepository,
    PersonRepository,
    PersonTagRepository,
    RoleTagRepository,
    ScheduleRepository,
    SongRepository,
)


def get_person_repository(session: DBSession) -> PersonRepository:
    return PersonRepository(session)


def get_access_record_repository(session: DBSession) -> AccessRecordRepository:
    return AccessRecordRepository(session)


def get_invitation_repository(session: DBSession) -> InvitationRepository:
    return InvitationRepository(session)


def get_role_tag_repository(session: DBSession) -> RoleTagRepository:
    return RoleTagRepository(session)


def get_person_tag_repository(session: DBSession) -> PersonTagRepository:
    return PersonTagRepository(session)


def get_schedule_repository(session: DBSession) -> ScheduleRepository:
    return ScheduleRepository(session)


def get_song_repository(session: DBSession) -> SongRepository:
    return SongRepository(session)


PersonRepo = Annotated[PersonRepository, Depends(get_person_repository)]
AccessRecordRepo = Annotated[AccessRecordRepository, Depends(get_access_record_repository)]
InvitationRepo = Annotated[InvitationRepository, Depends(get_invitation_repository)]
RoleTagRepo = Annotated[RoleTagRepository, Depends(get_role_tag_repository)]
PersonTagRepo = Annotated[PersonTagRepository, Depends(get_person_tag_repository)]
ScheduleRepo = Annotated[ScheduleRepository, Depends(get_schedule_repository)]
SongRepo = Annotated[SongRepository, Depends(get_song_repository)]
