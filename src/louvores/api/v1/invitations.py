"""Invitation API endpoints.

Create requires an account allowed to manage users. Verify and accept are
public: possession of the token is the credential.
"""

from fastapi import APIRouter, Request, Response, status

from src.louvores.api.dependencies import CurrentAccount, InvitationServiceDep, UserManager
from src.louvores.core.rate_limit import invite_rate_limit, limiter
from src.louvores.schemas.invitation import (
    InvitationAcceptRequest,
    InvitationAcceptResponse,
    InvitationCreateRequest,
    InvitationCreateResponse,
    InvitationLinkData,
    InvitationPublic,
    InvitationVerifyResponse,
)

router = APIRouter(tags=["invitations"])


@router.post(
    "/enviar-convite",
    response_model=InvitationCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create invitation",
    description=(
        "Invite an existing person (person_id) or a new one (email, name, role). "
        "Returns the pending invitation unchanged when one already exists (200)."
    ),
)
@limiter.limit(invite_rate_limit)
async def create_invitation(
    request: Request,
    response: Response,
    payload: InvitationCreateRequest,
    account: CurrentAccount,
    _: UserManager,
    invitation_service: InvitationServiceDep,
) -> InvitationCreateResponse:
    outcome = await invitation_service.create_invitation(
        invited_by=account.id,
        person_id=payload.person_id,
        email=payload.email,
        name=payload.name,
        role=payload.role,
        phone=payload.phone,
    )
    invitation = outcome.invitation

    if outcome.created:
        message = f"Convite criado para {invitation.email}"
        if not outcome.email_sent:
            message += " (email não enviado, compartilhe o link manualmente)"
    else:
        response.status_code = status.HTTP_200_OK
        message = f"Já existe um convite pendente para {invitation.email}"

    return InvitationCreateResponse(
        message=message,
        already_pending=not outcome.created,
        data=InvitationLinkData(
            token=invitation.token,
            link=outcome.link,
            expira_em=invitation.expires_at,
            email_sent=outcome.email_sent,
        ),
    )


@router.get(
    "/verificar-convite",
    response_model=InvitationVerifyResponse,
    summary="Verify invitation",
    description="Public fields of a pending invitation. Expired invitations are marked expired.",
)
async def verify_invitation(
    invitation_service: InvitationServiceDep,
    token: str | None = None,
) -> InvitationVerifyResponse:
    invitation = await invitation_service.verify(token)
    return InvitationVerifyResponse(
        convite=InvitationPublic(
            email=invitation.email,
            name=invitation.name,
            role=invitation.role,
            expira_em=invitation.expires_at,
            person_id=invitation.person_id,
        )
    )


@router.post(
    "/aceitar-convite",
    response_model=InvitationAcceptResponse,
    summary="Accept invitation",
    description="Link the identity-provider account to the invited person. Safe to retry.",
)
async def accept_invitation(
    payload: InvitationAcceptRequest,
    invitation_service: InvitationServiceDep,
) -> InvitationAcceptResponse:
    outcome = await invitation_service.accept(payload.token, payload.account_id)
    return InvitationAcceptResponse(
        message=outcome.message,
        person_id=outcome.person_id,
        redirect=outcome.redirect,
    )
