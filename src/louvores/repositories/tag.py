"""Repositories for RoleTag and PersonTag."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.louvores.models import PersonTag, RoleTag
from src.louvores.repositories.base import BaseRepository


class RoleTagRepository(BaseRepository[RoleTag]):
    model = RoleTag

    async def list_active(self) -> list[RoleTag]:
        result = await self.session.execute(
            select(RoleTag)
            .where(RoleTag.active == True)  # noqa: E712
            .order_by(RoleTag.display_order, RoleTag.name)
        )
        return list(result.scalars().all())


class PersonTagRepository:
    """Repository for the person/tag association (composite key)."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, person_id: UUID, tag_id: UUID) -> PersonTag | None:
        return await self.session.get(PersonTag, (person_id, tag_id))

    async def add(self, person_id: UUID, tag_id: UUID, skill_level: int = 1) -> PersonTag:
        link = PersonTag(person_id=person_id, tag_id=tag_id, skill_level=skill_level)
        self.session.add(link)
        await self.session.flush()
        return link

    async def remove(self, link: PersonTag) -> None:
        await self.session.delete(link)
        await self.session.flush()

    async def tags_for_people(self, person_ids: Iterable[UUID]) -> dict[UUID, list[RoleTag]]:
        """Tags of each person, one query for all of them."""
        ids = set(person_ids)
        if not ids:
            return {}
        result = await self.session.execute(
            select(PersonTag.person_id, RoleTag)
            .join(RoleTag, RoleTag.id == PersonTag.tag_id)  # type: ignore[arg-type]
            .where(PersonTag.person_id.in_(ids))  # type: ignore[attr-defined]
            .order_by(RoleTag.display_order, RoleTag.name)
        )
        tags: dict[UUID, list[RoleTag]] = {person_id: [] for person_id in ids}
        for person_id, tag in result.all():
            tags[person_id].append(tag)
        return tags
