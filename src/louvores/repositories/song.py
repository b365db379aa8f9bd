"""Repositories for songs and service song lists."""

from uuid import UUID

from sqlmodel import select

from src.louvores.models import ServiceSongItem, Song
from src.louvores.repositories.base import BaseRepository


class SongRepository(BaseRepository[Song]):
    model = Song

    async def list_service_items(self, service_id: UUID) -> list[ServiceSongItem]:
        """Song entries of a worship service in display order."""
        result = await self.session.execute(
            select(ServiceSongItem)
            .where(ServiceSongItem.service_id == service_id)
            .order_by(ServiceSongItem.display_order)
        )
        return list(result.scalars().all())
