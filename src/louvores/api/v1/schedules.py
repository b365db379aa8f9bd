"""Schedule endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query

from src.louvores.api.dependencies import CurrentAccount, ScheduleServiceDep
from src.louvores.schemas.schedule import ScheduleResponse

router = APIRouter(prefix="/escalas", tags=["schedules"])


@router.get(
    "",
    response_model=ScheduleResponse,
    summary="Schedule of a service date",
    description="Returns escala=null when no schedule exists for the date.",
)
async def get_schedule(
    account: CurrentAccount,
    schedule_service: ScheduleServiceDep,
    service_date: Annotated[date, Query(alias="data")],
) -> ScheduleResponse:
    return ScheduleResponse(escala=await schedule_service.get_by_date(service_date))
