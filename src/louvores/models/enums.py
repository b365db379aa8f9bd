"""Shared enums for models."""

from enum import Enum


class Role(str, Enum):
    """Congregation role of a person, also the key of the permission tables."""

    MEMBER = "membro"
    PASTOR = "pastor"
    SEMINARIAN = "seminarista"
    ELDER = "presbitero"
    STAFF = "staff"
    MUSICIAN = "musico"
    ADMIN = "admin"


class InvitationStatus(str, Enum):
    """Invitation lifecycle status."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"


class ScheduleStatus(str, Enum):
    """Publication status of a service schedule."""

    DRAFT = "rascunho"
    PUBLISHED = "publicada"
    DONE = "concluida"
