"""People registry endpoints. All require the manage-users capability."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.louvores.api.dependencies import PersonServiceDep, UserManager
from src.louvores.schemas.person import (
    PersonCreateRequest,
    PersonDeleteResponse,
    PersonListResponse,
    PersonRead,
    PersonResponse,
    PersonUpdateRequest,
)

router = APIRouter(prefix="/pessoas", tags=["people"])


@router.get("", response_model=PersonListResponse, summary="List people")
async def list_people(
    _: UserManager,
    person_service: PersonServiceDep,
    ativo: Annotated[bool | None, Query()] = None,
    tem_acesso: Annotated[bool | None, Query()] = None,
    cargo: Annotated[str | None, Query()] = None,
    busca: Annotated[str | None, Query(max_length=100)] = None,
) -> PersonListResponse:
    people = await person_service.list_people(
        active=ativo, has_access=tem_acesso, role=cargo, term=busca
    )
    data = [PersonRead.from_model(person, tags) for person, tags in people]
    return PersonListResponse(data=data, count=len(data))


@router.post(
    "",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create person",
    description="Creates a person without system access.",
)
async def create_person(
    payload: PersonCreateRequest,
    _: UserManager,
    person_service: PersonServiceDep,
) -> PersonResponse:
    person = await person_service.create_person(
        name=payload.name,
        role=payload.role,
        email=payload.email,
        phone=payload.phone,
        active=payload.active,
        photo_url=payload.photo_url,
        notes=payload.notes,
    )
    suffix = "" if person.email else " (sem acesso - fantasma)"
    return PersonResponse(
        message=f"{person.name} cadastrado{suffix}", data=PersonRead.from_model(person)
    )


@router.get("/{person_id}", response_model=PersonResponse, summary="Get person")
async def get_person(
    person_id: UUID,
    _: UserManager,
    person_service: PersonServiceDep,
) -> PersonResponse:
    person, tags = await person_service.get_person(person_id)
    return PersonResponse(data=PersonRead.from_model(person, tags))


@router.patch("/{person_id}", response_model=PersonResponse, summary="Update person")
async def update_person(
    person_id: UUID,
    payload: PersonUpdateRequest,
    _: UserManager,
    person_service: PersonServiceDep,
) -> PersonResponse:
    person = await person_service.update_person(person_id, payload.model_dump(exclude_unset=True))
    return PersonResponse(
        message="Pessoa atualizada com sucesso", data=PersonRead.from_model(person)
    )


@router.delete("/{person_id}", response_model=PersonDeleteResponse, summary="Delete person")
async def delete_person(
    person_id: UUID,
    _: UserManager,
    person_service: PersonServiceDep,
) -> PersonDeleteResponse:
    person = await person_service.delete_person(person_id)
    return PersonDeleteResponse(message=f"{person.name} removido com sucesso")
