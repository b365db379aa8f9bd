"""Invitation lifecycle service.

States: ``pending`` -> ``accepted`` | ``expired``. Both end states are
terminal. Expiry is applied lazily whenever an invitation is read past its
``expires_at``.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.louvores.core.config import get_settings
from src.louvores.core.exceptions import (
    ConflictError,
    GoneError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    ServiceError,
)
from src.louvores.core.identity import IdentityClient
from src.louvores.core.logging import get_logger
from src.louvores.core.notifications import send_invite_email
from src.louvores.core.permissions import parse_role
from src.louvores.core.phone import validate_phone_number
from src.louvores.models import Invitation, InvitationStatus, Person, has_passed, utc_now
from src.louvores.repositories import (
    AccessRecordRepository,
    InvitationRepository,
    PersonRepository,
)

logger = get_logger(__name__)


def normalize_email(email: str | None) -> str | None:
    if email is None:
        return None
    return email.strip().lower() or None


def _phone_digits(phone: str | None) -> str | None:
    try:
        return validate_phone_number(phone)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


def _parse_account_id(value: UUID | str) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except ValueError as e:
        raise NotFoundError("Usuário não encontrado no sistema de autenticação") from e


def invitation_link(token: str) -> str:
    return f"{get_settings().app_url}/aceitar-convite/{token}"


@dataclass
class InvitationOutcome:
    """Result of Create: the invitation to share and how it was obtained."""

    invitation: Invitation
    link: str
    created: bool
    email_sent: bool = False


@dataclass
class AcceptOutcome:
    person_id: UUID
    message: str
    redirect: str


class InvitationService:
    """Service for invitation create / verify / accept."""

    def __init__(
        self,
        invitation_repo: InvitationRepository,
        person_repo: PersonRepository,
        access_repo: AccessRecordRepository,
        session: AsyncSession,
        identity_client: IdentityClient,
    ):
        self.invitation_repo = invitation_repo
        self.person_repo = person_repo
        self.access_repo = access_repo
        self.session = session
        self.identity_client = identity_client

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def create_invitation(
        self,
        invited_by: UUID,
        person_id: UUID | None = None,
        email: str | None = None,
        name: str | None = None,
        role: str | None = None,
        phone: str | None = None,
    ) -> InvitationOutcome:
        """Create an invitation, or return the one already pending for the target.

        Two paths: ``person_id`` invites an existing person without access;
        otherwise email, name and role describe a person created on acceptance.
        """
        settings = get_settings()
        email = normalize_email(email)

        try:
            if person_id is not None:
                person, target_email = await self._person_for_invite(person_id, email)
                pending = await self._reusable_pending(
                    await self.invitation_repo.get_pending_for_person(person.id)
                )
                snapshot_name, snapshot_role, snapshot_phone = person.name, person.role, person.phone
            else:
                target_email, snapshot_name, snapshot_role = await self._check_new_target(
                    email, name, role
                )
                pending = await self._reusable_pending(
                    await self.invitation_repo.get_pending_for_email(target_email)
                )
                snapshot_phone = _phone_digits(phone)

            if pending is not None:
                await self.session.commit()
                logger.info(
                    "Invitation already pending",
                    invitation_id=str(pending.id),
                    person_id=str(pending.person_id) if pending.person_id else None,
                )
                return InvitationOutcome(
                    invitation=pending, link=invitation_link(pending.token), created=False
                )

            now = utc_now()
            invitation = Invitation(
                email=target_email,
                name=snapshot_name,
                role=snapshot_role,
                phone=snapshot_phone,
                person_id=person_id,
                expires_at=now + timedelta(days=settings.invite_expire_days),
                invited_by=invited_by,
                send_attempts=1,
                last_sent_at=now,
            )
            self.invitation_repo.add(invitation)
            try:
                await self.session.flush()
            except IntegrityError:
                # A concurrent create won the partial unique index
                await self.session.rollback()
                return await self._concurrent_winner(person_id, target_email)

            await self.session.commit()

        except ServiceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to create invitation", error=str(e))
            raise

        logger.info(
            "Invitation created",
            invitation_id=str(invitation.id),
            person_id=str(person_id) if person_id else None,
            invited_by=str(invited_by),
            expires_at=invitation.expires_at.isoformat(),
        )

        link = invitation_link(invitation.token)
        email_sent = await asyncio.to_thread(
            send_invite_email,
            invitation.email,
            invitation.name,
            link,
            invitation.expires_at,
        )
        if not email_sent:
            logger.warning(
                "Invitation email not delivered, link must be shared manually",
                invitation_id=str(invitation.id),
            )
        return InvitationOutcome(
            invitation=invitation, link=link, created=True, email_sent=email_sent
        )

    async def _person_for_invite(
        self, person_id: UUID, email: str | None
    ) -> tuple[Person, str]:
        person = await self.person_repo.get_by_id(person_id)
        if person is None:
            raise NotFoundError("Pessoa não encontrada")
        if person.has_access:
            raise ConflictError(f"{person.name} já tem acesso ao sistema")

        if not person.email:
            if email is None:
                raise InvalidInputError("Email é obrigatório para enviar o convite")
            other = await self.person_repo.email_taken(email, exclude_id=person.id)
            if other is not None:
                raise ConflictError(f"Já existe uma pessoa com este email: {other.name}")
            person.email = email
            person.updated_at = utc_now()
            self.person_repo.add(person)
            return person, email
        return person, person.email.strip().lower()

    async def _check_new_target(
        self, email: str | None, name: str | None, role: str | None
    ) -> tuple[str, str, str]:
        name = name.strip() if name else None
        if not email or not name or not role:
            raise InvalidInputError("Email, nome e cargo são obrigatórios")
        if parse_role(role) is None:
            raise InvalidInputError(f"Cargo inválido: {role}")

        existing = await self.person_repo.get_by_email(email)
        if existing is not None:
            if existing.has_access:
                raise ConflictError("Este email já tem acesso ao sistema")
            raise ConflictError(
                f"{existing.name} já está cadastrado sem acesso. "
                "Envie o convite a partir do cadastro da pessoa.",
                extra={"person_id": str(existing.id)},
            )
        return email, name, role

    async def _reusable_pending(self, invitation: Invitation | None) -> Invitation | None:
        """Return a still-valid pending invitation; expire a stale one."""
        if invitation is None:
            return None
        if has_passed(invitation.expires_at):
            await self._expire(invitation)
            return None
        return invitation

    async def _concurrent_winner(self, person_id: UUID | None, email: str) -> InvitationOutcome:
        if person_id is not None:
            winner = await self.invitation_repo.get_pending_for_person(person_id)
        else:
            winner = await self.invitation_repo.get_pending_for_email(email)
        if winner is None:
            raise ConflictError("Já existe um convite pendente para este destinatário")
        logger.info("Invitation already pending (concurrent create)", invitation_id=str(winner.id))
        return InvitationOutcome(invitation=winner, link=invitation_link(winner.token), created=False)

    async def _expire(self, invitation: Invitation) -> None:
        await self.invitation_repo.mark_expired(invitation)
        logger.info("Invitation expired", invitation_id=str(invitation.id))

    # ------------------------------------------------------------------
    # Verify
    # ------------------------------------------------------------------

    async def verify(self, token: str | None) -> Invitation:
        """Return a pending, unexpired invitation for the acceptance page.

        Reading an invitation past its expiry moves it to ``expired``.
        """
        if not token:
            raise InvalidInputError("Token é obrigatório")

        try:
            invitation = await self.invitation_repo.get_by_token(token)
            if invitation is None:
                raise NotFoundError("Convite não encontrado")

            if has_passed(invitation.expires_at):
                if invitation.status == InvitationStatus.PENDING.value:
                    await self._expire(invitation)
                    await self.session.commit()
                raise GoneError("Este convite expirou", extra={"expira_em": _iso(invitation.expires_at)})

            if invitation.status != InvitationStatus.PENDING.value:
                raise InvalidStateError(
                    "Este convite já foi utilizado",
                    extra={"status": invitation.status, "aceito_em": _iso(invitation.accepted_at)},
                )
            return invitation

        except ServiceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to verify invitation", error=str(e))
            raise

    # ------------------------------------------------------------------
    # Accept
    # ------------------------------------------------------------------

    async def accept(self, token: str | None, account_id: UUID | str | None) -> AcceptOutcome:
        """Accept an invitation for an identity-provider account.

        Safe to retry: accepting again with the same account replays the
        first result without writing.
        """
        if not token or not account_id:
            raise InvalidInputError("Token e account_id são obrigatórios")
        account_id = _parse_account_id(account_id)

        settings = get_settings()
        try:
            invitation = await self.invitation_repo.get_by_token(token)
            if invitation is None or invitation.status == InvitationStatus.EXPIRED.value:
                raise NotFoundError("Convite inválido ou já utilizado")

            if invitation.status == InvitationStatus.ACCEPTED.value:
                if invitation.accepted_by == account_id:
                    return await self._replay(invitation, account_id)
                raise NotFoundError("Convite inválido ou já utilizado")

            if has_passed(invitation.expires_at):
                await self._expire(invitation)
                await self.session.commit()
                raise GoneError("Este convite expirou", extra={"expira_em": _iso(invitation.expires_at)})

            account = await self.identity_client.get_account(account_id)
            if account is None:
                raise NotFoundError("Usuário não encontrado no sistema de autenticação")
            email = account.email or invitation.email

            if invitation.person_id is not None:
                person = await self.person_repo.get_by_id(invitation.person_id)
                if person is None:
                    raise NotFoundError("Pessoa não encontrada")
                await self._check_account_free(account_id, person.id)
                await self._link(person, account_id, email)
                snapshot = (person.name, person.role, person.phone)
                message = f"{person.name} agora tem acesso ao sistema!"
            else:
                person = await self._existing_person_for_account(account_id, email)
                if person is not None:
                    if person.has_access:
                        logger.warning(
                            "Accepting invitation for person that already has access",
                            person_id=str(person.id),
                        )
                    await self._link(person, account_id, email)
                else:
                    person = Person(
                        id=account_id,
                        name=invitation.name,
                        role=invitation.role,
                        email=email,
                        phone=invitation.phone,
                        active=True,
                        has_access=True,
                        account_id=account_id,
                    )
                    self.person_repo.add(person)
                    await self.session.flush()
                    logger.info("Person created", person_id=str(person.id), source="invitation")
                snapshot = (invitation.name, invitation.role, invitation.phone)
                message = f"Bem-vindo, {invitation.name}!"

            name, role, phone = snapshot
            await self.access_repo.upsert(
                account_id=account_id,
                person_id=person.id,
                email=email,
                name=name,
                role=role,
                phone=phone,
            )
            await self.invitation_repo.mark_accepted(invitation, account_id)

            person_id = person.id
            invitation_id = str(invitation.id)
            await self.session.commit()

        except ServiceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to accept invitation", error=str(e))
            raise

        logger.info(
            "Invitation accepted",
            invitation_id=invitation_id,
            person_id=str(person_id),
            account_id=str(account_id),
        )
        return AcceptOutcome(
            person_id=person_id, message=message, redirect=settings.accept_redirect_path
        )

    async def _existing_person_for_account(self, account_id: UUID, email: str) -> Person | None:
        """Person already tied to this account, or else the one holding the email."""
        person = await self.person_repo.get_by_account_id(account_id)
        if person is None:
            person = await self.person_repo.get_by_id(account_id)
        if person is None:
            person = await self.person_repo.get_by_email(email)
        return person

    async def _check_account_free(self, account_id: UUID, person_id: UUID) -> None:
        linked = await self.person_repo.get_by_account_id(account_id)
        if linked is not None and linked.id != person_id:
            raise ConflictError("Esta conta já está vinculada a outra pessoa")

    async def _link(self, person: Person, account_id: UUID, email: str) -> None:
        other = await self.person_repo.email_taken(email, exclude_id=person.id)
        if other is not None:
            raise ConflictError(f"O email {email} já pertence a outra pessoa")
        person.account_id = account_id
        person.email = email
        person.has_access = True
        person.active = True
        person.updated_at = utc_now()
        self.person_repo.add(person)
        await self.session.flush()

    async def _replay(self, invitation: Invitation, account_id: UUID) -> AcceptOutcome:
        person_id = invitation.person_id or account_id
        person = await self.person_repo.get_by_id(person_id)
        if person is None:
            person = await self.person_repo.get_by_account_id(account_id)
        if person is None:
            raise NotFoundError("Pessoa não encontrada")
        logger.info("Invitation acceptance replayed", invitation_id=str(invitation.id))
        if invitation.person_id is not None:
            message = f"{person.name} agora tem acesso ao sistema!"
        else:
            message = f"Bem-vindo, {invitation.name}!"
        return AcceptOutcome(
            person_id=person.id, message=message, redirect=get_settings().accept_redirect_path
        )


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
