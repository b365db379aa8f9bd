"""Base repository with common CRUD operations."""

from collections.abc import Iterable
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    async def get_many_by_ids(self, ids: Iterable[UUID]) -> dict[UUID, ModelType]:
        """Batched lookup by primary key, keyed by id. Missing ids are absent."""
        unique_ids = set(ids)
        if not unique_ids:
            return {}
        result = await self.session.execute(
            select(self.model).where(self.model.id.in_(unique_ids))  # type: ignore[attr-defined]
        )
        return {row.id: row for row in result.scalars().all()}  # type: ignore[attr-defined]

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def save(self, entity: ModelType) -> ModelType:
        """Add entity and flush so database defaults and constraints apply."""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete(self, entity: ModelType) -> None:
        await self.session.delete(entity)
        await self.session.flush()
