from fastapi import APIRouter

from src.louvores.api.v1 import invitations, people, permissions, schedules, tags

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(invitations.router)
api_router.include_router(people.router)
api_router.include_router(tags.router)
api_router.include_router(permissions.router)
api_router.include_router(schedules.router)
