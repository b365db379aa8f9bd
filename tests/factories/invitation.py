"""Invitation factory."""

import secrets
from datetime import timedelta
from uuid import uuid4

from polyfactory import Use

from src.louvores.models import Invitation, InvitationStatus, Role, utc_now
from tests.factories.base import BaseFactory


class InvitationFactory(BaseFactory):
    """Pending invitation for a brand-new person, valid for 7 days."""

    __model__ = Invitation

    id = Use(uuid4)
    token = Use(lambda: secrets.token_urlsafe(32))
    email = Use(lambda: f"{uuid4().hex[:10]}@example.com")
    name = "Maria Silva"
    role = Role.MUSICIAN.value
    phone = None
    person_id = None
    status = InvitationStatus.PENDING.value
    expires_at = Use(lambda: utc_now() + timedelta(days=7))
    accepted_at = None
    accepted_by = None
    invited_by = None
    send_attempts = 1
    last_sent_at = Use(utc_now)
    created_at = Use(utc_now)

    @classmethod
    def expired(cls, **kwargs):
        """Pending invitation whose expiry has passed (not yet transitioned)."""
        return cls.build(expires_at=utc_now() - timedelta(days=1), **kwargs)

    @classmethod
    def accepted(cls, account_id, **kwargs):
        return cls.build(
            status=InvitationStatus.ACCEPTED.value,
            accepted_at=utc_now(),
            accepted_by=account_id,
            **kwargs,
        )
