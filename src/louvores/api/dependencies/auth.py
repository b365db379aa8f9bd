"""Authentication and authorization dependencies.

Bearer tokens are issued by the identity provider and verified locally;
capabilities come from the permission service.
"""

from typing import Annotated

from fastapi import Depends, Header

from src.louvores.api.dependencies.services import PermissionServiceDep
from src.louvores.core.exceptions import AuthenticationError, PermissionDeniedError
from src.louvores.core.logging import bind_account_context
from src.louvores.core.permissions import Capability
from src.louvores.core.security import Account, account_from_claims, decode_access_token
from src.louvores.services import PermissionResolution


async def get_current_account(
    authorization: Annotated[str | None, Header()] = None,
) -> Account:
    """Validate the bearer token and return the account it identifies."""
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationError("Token de acesso ausente ou inválido")

    claims = decode_access_token(authorization[7:])
    if claims is None:
        raise AuthenticationError("Token inválido ou expirado")

    account = account_from_claims(claims)
    if account is None:
        raise AuthenticationError("Token com identificação inválida")

    bind_account_context(account.id, account.email)
    return account


CurrentAccount = Annotated[Account, Depends(get_current_account)]


async def get_resolved_permissions(
    account: CurrentAccount,
    permission_service: PermissionServiceDep,
) -> PermissionResolution:
    return await permission_service.resolve(account)


ResolvedPermissions = Annotated[PermissionResolution, Depends(get_resolved_permissions)]


def require_capability(capability: Capability):  # type: ignore[no-untyped-def]
    """Dependency factory that rejects accounts lacking ``capability``."""

    async def _check(permissions: ResolvedPermissions) -> PermissionResolution:
        if not permissions.has(capability):
            raise PermissionDeniedError("Você não tem permissão para esta ação")
        return permissions

    return _check


UserManager = Annotated[PermissionResolution, Depends(require_capability(Capability.MANAGE_USERS))]
