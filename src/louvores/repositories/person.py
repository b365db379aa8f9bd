"""Repositories for Person and AccessRecord."""

from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.dialects.postgresql import insert
from sqlmodel import select

from src.louvores.models import AccessRecord, Person, ScheduledFunction, utc_now
from src.louvores.repositories.base import BaseRepository


class PersonRepository(BaseRepository[Person]):
    """Repository for Person entity."""

    model = Person

    async def get_by_email(self, email: str) -> Person | None:
        """Get person by email (case-insensitive)."""
        result = await self.session.execute(
            select(Person).where(func.lower(Person.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def email_taken(self, email: str, exclude_id: UUID | None = None) -> Person | None:
        """Return another person already using this email, if any."""
        query = select(Person).where(func.lower(Person.email) == email.lower())
        if exclude_id is not None:
            query = query.where(Person.id != exclude_id)
        result = await self.session.execute(query)
        return result.scalars().first()

    async def get_by_account_id(self, account_id: UUID) -> Person | None:
        result = await self.session.execute(select(Person).where(Person.account_id == account_id))
        return result.scalar_one_or_none()

    async def search(
        self,
        active: bool | None = None,
        has_access: bool | None = None,
        role: str | None = None,
        term: str | None = None,
    ) -> list[Person]:
        """List people ordered by name with optional filters.

        ``term`` is a case-insensitive substring match on name or email.
        """
        query = select(Person)
        if active is not None:
            query = query.where(Person.active == active)
        if has_access is not None:
            query = query.where(Person.has_access == has_access)
        if role:
            query = query.where(Person.role == role)
        if term:
            pattern = f"%{term}%"
            query = query.where(
                or_(
                    Person.name.ilike(pattern),  # type: ignore[attr-defined]
                    Person.email.ilike(pattern),  # type: ignore[union-attr]
                )
            )
        result = await self.session.execute(query.order_by(Person.name))
        return list(result.scalars().all())

    async def count_schedule_assignments(self, person_id: UUID) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(ScheduledFunction)
            .where(ScheduledFunction.person_id == person_id)
        )
        return int(result.scalar_one())


class AccessRecordRepository(BaseRepository[AccessRecord]):
    """Repository for AccessRecord entity (keyed by account id)."""

    model = AccessRecord

    async def get_by_email(self, email: str) -> AccessRecord | None:
        result = await self.session.execute(
            select(AccessRecord).where(func.lower(AccessRecord.email) == email.lower())
        )
        return result.scalars().first()

    async def upsert(
        self,
        account_id: UUID,
        person_id: UUID,
        email: str,
        name: str,
        role: str,
        phone: str | None,
    ) -> None:
        """Insert or refresh the access record for an account.

        ``INSERT ... ON CONFLICT (id) DO UPDATE`` so retries never create a
        second row.
        """
        now = utc_now()
        values = {
            "person_id": person_id,
            "email": email,
            "name": name,
            "role": role,
            "phone": phone,
            "active": True,
            "updated_at": now,
        }
        stmt = insert(AccessRecord).values(id=account_id, created_at=now, **values)
        stmt = stmt.on_conflict_do_update(index_elements=["id"], set_=values)
        await self.session.execute(stmt)
