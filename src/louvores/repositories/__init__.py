"""Repository exports."""

from src.louvores.repositories.base import BaseRepository
from src.louvores.repositories.invitation import InvitationRepository
from src.louvores.repositories.person import AccessRecordRepository, PersonRepository
from src.louvores.repositories.schedule import ScheduleRepository
from src.louvores.repositories.song import SongRepository
from src.louvores.repositories.tag import PersonTagRepository, RoleTagRepository

__all__ = [
    "AccessRecordRepository",
    "BaseRepository",
    "InvitationRepository",
    "PersonRepository",
    "PersonTagRepository",
    "RoleTagRepository",
    "ScheduleRepository",
    "SongRepository",
]
