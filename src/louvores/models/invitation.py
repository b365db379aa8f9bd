"""Invitation model."""

import secrets
from datetime import datetime
from uuid import UUID, uuid4

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from src.louvores.models.base import utc_now
from src.louvores.models.enums import InvitationStatus, Role


def generate_token() -> str:
    return secrets.token_urlsafe(32)


class Invitation(SQLModel, table=True):
    """Single-use access invitation.

    Name, role and phone are a snapshot taken at creation time. The partial
    unique indexes keep at most one pending invitation per person, and per
    email among invitations not linked to a person.
    """

    __tablename__ = "invitations"
    __table_args__ = (
        sa.Index(
            "uq_invitations_pending_person",
            "person_id",
            unique=True,
            postgresql_where=sa.text("status = 'pending' AND person_id IS NOT NULL"),
        ),
        sa.Index(
            "uq_invitations_pending_email",
            "email",
            unique=True,
            postgresql_where=sa.text("status = 'pending' AND person_id IS NULL"),
        ),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    token: str = Field(default_factory=generate_token, max_length=64, unique=True, index=True)
    email: str = Field(max_length=255, index=True)
    name: str = Field(max_length=150)
    role: str = Field(default=Role.MEMBER.value, max_length=50)
    phone: str | None = Field(default=None, max_length=20)
    person_id: UUID | None = Field(
        default=None, foreign_key="people.id", ondelete="CASCADE", index=True
    )
    status: str = Field(default=InvitationStatus.PENDING.value, max_length=20)
    expires_at: datetime
    accepted_at: datetime | None = Field(default=None)
    accepted_by: UUID | None = Field(default=None)
    invited_by: UUID | None = Field(default=None)
    send_attempts: int = Field(default=0)
    last_sent_at: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
