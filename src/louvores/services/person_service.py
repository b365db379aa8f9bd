"""People registry service."""

from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.louvores.core.exceptions import (
    ConflictError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    ServiceError,
)
from src.louvores.core.logging import get_logger
from src.louvores.core.permissions import parse_role
from src.louvores.core.phone import validate_phone_number
from src.louvores.models import Person, RoleTag, utc_now
from src.louvores.repositories import (
    AccessRecordRepository,
    PersonRepository,
    PersonTagRepository,
)

logger = get_logger(__name__)

PersonWithTags = tuple[Person, list[RoleTag]]


def _phone_digits(phone: str | None) -> str | None:
    try:
        return validate_phone_number(phone)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


def _duplicate_email(person: Person | None = None) -> ConflictError:
    if person is None:
        return ConflictError("Já existe outra pessoa com este email", status_code=409)
    return ConflictError(
        f"Já existe uma pessoa com este email: {person.name}",
        status_code=409,
        extra={"pessoa_existente": {"id": str(person.id), "name": person.name}},
    )


class PersonService:
    """CRUD over people. Persons with access are kept in step with their access record."""

    def __init__(
        self,
        person_repo: PersonRepository,
        person_tag_repo: PersonTagRepository,
        access_repo: AccessRecordRepository,
        session: AsyncSession,
    ):
        self.person_repo = person_repo
        self.person_tag_repo = person_tag_repo
        self.access_repo = access_repo
        self.session = session

    async def list_people(
        self,
        active: bool | None = None,
        has_access: bool | None = None,
        role: str | None = None,
        term: str | None = None,
    ) -> list[PersonWithTags]:
        people = await self.person_repo.search(
            active=active, has_access=has_access, role=role, term=term.strip() if term else None
        )
        tags = await self.person_tag_repo.tags_for_people(p.id for p in people)
        return [(person, tags.get(person.id, [])) for person in people]

    async def get_person(self, person_id: UUID) -> PersonWithTags:
        person = await self.person_repo.get_by_id(person_id)
        if person is None:
            raise NotFoundError("Pessoa não encontrada")
        tags = await self.person_tag_repo.tags_for_people([person.id])
        return person, tags.get(person.id, [])

    async def create_person(
        self,
        name: str | None,
        role: str | None,
        email: str | None = None,
        phone: str | None = None,
        active: bool = True,
        photo_url: str | None = None,
        notes: str | None = None,
    ) -> Person:
        """Create a person without access (a "ghost" record)."""
        name = name.strip() if name else None
        if not name or not role:
            raise InvalidInputError("Nome e cargo são obrigatórios")
        if parse_role(role) is None:
            raise InvalidInputError(f"Cargo inválido: {role}")
        email = email.strip().lower() if email else None
        phone = _phone_digits(phone)

        try:
            if email:
                existing = await self.person_repo.get_by_email(email)
                if existing is not None:
                    raise _duplicate_email(existing)

            person = Person(
                name=name,
                role=role,
                email=email,
                phone=phone,
                active=active,
                photo_url=photo_url,
                notes=notes or None,
                has_access=False,
            )
            self.person_repo.add(person)
            await self.session.flush()
            await self.session.commit()

        except IntegrityError as e:
            await self.session.rollback()
            raise _duplicate_email() from e
        except ServiceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to create person", error=str(e))
            raise

        logger.info("Person created", person_id=str(person.id), source="registry")
        return person

    async def update_person(self, person_id: UUID, changes: dict[str, Any]) -> Person:
        """Apply a partial update.

        The email of a person with access is owned by the identity provider
        and cannot change here.
        """
        try:
            person = await self.person_repo.get_by_id(person_id)
            if person is None:
                raise NotFoundError("Pessoa não encontrada")

            if "name" in changes:
                name = (changes["name"] or "").strip()
                if not name:
                    raise InvalidInputError("Nome não pode ser vazio")
                person.name = name

            if "role" in changes:
                if parse_role(changes["role"]) is None:
                    raise InvalidInputError(f"Cargo inválido: {changes['role']}")
                person.role = changes["role"]

            if "email" in changes:
                email = changes["email"].strip().lower() if changes["email"] else None
                if email != person.email:
                    if person.account_id is not None:
                        raise InvalidInputError(
                            "Não é possível alterar o email de uma pessoa com acesso ao sistema"
                        )
                    if email and await self.person_repo.email_taken(email, exclude_id=person.id):
                        raise _duplicate_email()
                    person.email = email

            if "phone" in changes:
                person.phone = _phone_digits(changes["phone"])
            if "active" in changes and changes["active"] is not None:
                person.active = changes["active"]
            for field in ("photo_url", "notes"):
                if field in changes:
                    setattr(person, field, changes[field] or None)

            person.updated_at = utc_now()
            self.person_repo.add(person)
            await self._sync_access_record(person)
            await self.session.flush()
            await self.session.commit()

        except IntegrityError as e:
            await self.session.rollback()
            raise _duplicate_email() from e
        except ServiceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to update person", person_id=str(person_id), error=str(e))
            raise

        logger.info("Person updated", person_id=str(person_id), fields=sorted(changes))
        return person

    async def _sync_access_record(self, person: Person) -> None:
        if person.account_id is None:
            return
        record = await self.access_repo.get_by_id(person.account_id)
        if record is None:
            return
        record.name = person.name
        record.role = person.role
        record.phone = person.phone
        record.active = person.active
        person.has_access = person.active
        record.updated_at = utc_now()
        self.access_repo.add(record)

    async def delete_person(self, person_id: UUID) -> Person:
        """Delete a person that has no access and no schedule assignments."""
        try:
            person = await self.person_repo.get_by_id(person_id)
            if person is None:
                raise NotFoundError("Pessoa não encontrada")
            if person.has_access:
                raise InvalidStateError(
                    "Não é possível deletar pessoa com acesso ao sistema. Desative-a primeiro."
                )

            count = await self.person_repo.count_schedule_assignments(person.id)
            if count > 0:
                raise InvalidStateError(
                    f"{person.name} está em {count} escala(s). "
                    "Remova das escalas primeiro ou desative a pessoa.",
                    extra={"count_escalas": count},
                )

            await self.person_repo.delete(person)
            await self.session.commit()

        except ServiceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to delete person", person_id=str(person_id), error=str(e))
            raise

        logger.info("Person deleted", person_id=str(person_id))
        return person
