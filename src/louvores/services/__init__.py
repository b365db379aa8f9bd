"""Business logic services."""

from src.louvores.services.invitation_service import (
    AcceptOutcome,
    InvitationOutcome,
    InvitationService,
)
from src.louvores.services.permission_service import PermissionResolution, PermissionService
from src.louvores.services.person_service import PersonService
from src.louvores.services.schedule_service import ScheduleService
from src.louvores.services.tag_service import TagService

__all__ = [
    "AcceptOutcome",
    "InvitationOutcome",
    "InvitationService",
    "PermissionResolution",
    "PermissionService",
    "PersonService",
    "ScheduleService",
    "TagService",
]
