"""Model exports.

Import from here: `from src.louvores.models import Person, Invitation`
"""

from src.louvores.models.base import has_passed, utc_now
from src.louvores.models.enums import InvitationStatus, Role, ScheduleStatus
from src.louvores.models.invitation import Invitation
from src.louvores.models.person import AccessRecord, Person
from src.louvores.models.schedule import Schedule, ScheduledFunction
from src.louvores.models.song import ServiceSongItem, Song
from src.louvores.models.tag import PersonTag, RoleTag

__all__ = [
    # Enums
    "InvitationStatus",
    "Role",
    "ScheduleStatus",
    # Models
    "AccessRecord",
    "Invitation",
    "Person",
    "PersonTag",
    "RoleTag",
    "Schedule",
    "ScheduledFunction",
    "ServiceSongItem",
    "Song",
    # Helpers
    "has_passed",
    "utc_now",
]
