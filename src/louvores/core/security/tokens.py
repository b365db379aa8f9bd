"""Verification of access tokens issued by the identity provider."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from jose import JWTError, jwt

from src.louvores.core.config import get_settings


@dataclass(frozen=True)
class Account:
    """Identity-provider account as seen by this service."""

    id: UUID
    email: str | None
    name: str | None = None


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Decode and validate an identity-provider JWT. Returns None on any error."""
    settings = get_settings()
    try:
        return jwt.decode(  # type: ignore[no-any-return]
            token,
            settings.identity_jwt_secret,
            algorithms=[settings.identity_jwt_algorithm],
            audience=settings.identity_jwt_audience,
        )
    except JWTError:
        return None


def account_from_claims(claims: dict[str, Any]) -> Account | None:
    """Build an Account from token claims, None if the subject is not a UUID."""
    try:
        account_id = UUID(str(claims.get("sub")))
    except ValueError:
        return None
    email = claims.get("email")
    metadata = claims.get("user_metadata") or {}
    return Account(
        id=account_id,
        email=email.strip().lower() if email else None,
        name=metadata.get("name") or metadata.get("full_name"),
    )
