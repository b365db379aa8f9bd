"""Repositories for schedules and their functions."""

from datetime import date
from uuid import UUID

from sqlmodel import select

from src.louvores.models import Schedule, ScheduledFunction
from src.louvores.repositories.base import BaseRepository


class ScheduleRepository(BaseRepository[Schedule]):
    model = Schedule

    async def get_by_date(self, service_date: date) -> Schedule | None:
        result = await self.session.execute(
            select(Schedule).where(Schedule.service_date == service_date)
        )
        return result.scalar_one_or_none()

    async def list_functions(self, schedule_id: UUID) -> list[ScheduledFunction]:
        """Functions of a schedule in display order."""
        result = await self.session.execute(
            select(ScheduledFunction)
            .where(ScheduledFunction.schedule_id == schedule_id)
            .order_by(ScheduledFunction.display_order)
        )
        return list(result.scalars().all())
