"""Repository for Invitation entity."""

from uuid import UUID

from sqlmodel import select

from src.louvores.models import Invitation, InvitationStatus, utc_now
from src.louvores.repositories.base import BaseRepository


class InvitationRepository(BaseRepository[Invitation]):
    """Repository for Invitation entity."""

    model = Invitation

    async def get_by_token(self, token: str) -> Invitation | None:
        """Get an invitation by token, whatever its status."""
        result = await self.session.execute(select(Invitation).where(Invitation.token == token))
        return result.scalar_one_or_none()

    async def get_pending_for_person(self, person_id: UUID) -> Invitation | None:
        result = await self.session.execute(
            select(Invitation)
            .where(
                Invitation.person_id == person_id,
                Invitation.status == InvitationStatus.PENDING.value,
            )
            .order_by(Invitation.created_at.desc())  # type: ignore[attr-defined]
        )
        return result.scalars().first()

    async def get_pending_for_email(self, email: str) -> Invitation | None:
        """Pending invitation for an email that is not linked to a person."""
        result = await self.session.execute(
            select(Invitation)
            .where(
                Invitation.email == email,
                Invitation.person_id.is_(None),  # type: ignore[union-attr]
                Invitation.status == InvitationStatus.PENDING.value,
            )
            .order_by(Invitation.created_at.desc())  # type: ignore[attr-defined]
        )
        return result.scalars().first()

    async def mark_expired(self, invitation: Invitation) -> Invitation:
        invitation.status = InvitationStatus.EXPIRED.value
        self.session.add(invitation)
        await self.session.flush()
        return invitation

    async def mark_accepted(self, invitation: Invitation, account_id: UUID) -> Invitation:
        invitation.status = InvitationStatus.ACCEPTED.value
        invitation.accepted_at = utc_now()
        invitation.accepted_by = account_id
        self.session.add(invitation)
        await self.session.flush()
        return invitation
