"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.louvores.api.dependencies.db import DBSession
from src.louvores.api.dependencies.repositories import (
    AccessRecordRepo,
    InvitationRepo,
    PersonRepo,
    PersonTagRepo,
    RoleTagRepo,
    ScheduleRepo,
    SongRepo,
)
from src.louvores.core.identity import IdentityClient, get_identity_client
from src.louvores.core.permissions import PermissionPolicy, get_permission_policy
from src.louvores.services import (
    InvitationService,
    PermissionService,
    PersonService,
    ScheduleService,
    TagService,
)

IdentityClientDep = Annotated[IdentityClient, Depends(get_identity_client)]
PolicyDep = Annotated[PermissionPolicy, Depends(get_permission_policy)]


def get_invitation_service(
    invitation_repo: InvitationRepo,
    person_repo: PersonRepo,
    access_repo: AccessRecordRepo,
    session: DBSession,
    identity_client: IdentityClientDep,
) -> InvitationService:
    return InvitationService(invitation_repo, person_repo, access_repo, session, identity_client)


def get_permission_service(access_repo: AccessRecordRepo, policy: PolicyDep) -> PermissionService:
    return PermissionService(access_repo, policy)


def get_schedule_service(
    schedule_repo: ScheduleRepo,
    tag_repo: RoleTagRepo,
    person_repo: PersonRepo,
    song_repo: SongRepo,
) -> ScheduleService:
    return ScheduleService(schedule_repo, tag_repo, person_repo, song_repo)


def get_person_service(
    person_repo: PersonRepo,
    person_tag_repo: PersonTagRepo,
    access_repo: AccessRecordRepo,
    session: DBSession,
) -> PersonService:
    return PersonService(person_repo, person_tag_repo, access_repo, session)


def get_tag_service(
    tag_repo: RoleTagRepo,
    person_tag_repo: PersonTagRepo,
    person_repo: PersonRepo,
    session: DBSession,
) -> TagService:
    return TagService(tag_repo, person_tag_repo, person_repo, session)


InvitationServiceDep = Annotated[InvitationService, Depends(get_invitation_service)]
PermissionServiceDep = Annotated[PermissionService, Depends(get_permission_service)]
ScheduleServiceDep = Annotated[ScheduleService, Depends(get_schedule_service)]
PersonServiceDep = Annotated[PersonService, Depends(get_person_service)]
TagServiceDep = Annotated[TagService, Depends(get_tag_service)]
