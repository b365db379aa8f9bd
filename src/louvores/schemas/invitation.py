"""Invitation schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class InvitationCreateRequest(BaseModel):
    """Invite an existing person (``person_id``) or a brand-new one.

    Required fields depend on the path and are checked by the service.
    """

    person_id: UUID | None = None
    email: EmailStr | None = None
    name: str | None = Field(default=None, max_length=150)
    role: str | None = Field(default=None, max_length=50)
    phone: str | None = Field(default=None, max_length=30)


class InvitationLinkData(BaseModel):
    token: str
    link: str
    expira_em: datetime
    email_sent: bool


class InvitationCreateResponse(BaseModel):
    success: bool = True
    message: str
    already_pending: bool = False
    data: InvitationLinkData


class InvitationPublic(BaseModel):
    """Public fields shown on the acceptance page."""

    email: str
    name: str
    role: str
    expira_em: datetime
    person_id: UUID | None


class InvitationVerifyResponse(BaseModel):
    success: bool = True
    convite: InvitationPublic


class InvitationAcceptRequest(BaseModel):
    token: str | None = None
    # Parsed by the service: a malformed id is an unknown account, not a bad request
    account_id: str | None = None


class InvitationAcceptResponse(BaseModel):
    success: bool = True
    message: str
    person_id: UUID
    redirect: str
