"""Security utilities - token verification and response headers."""

from src.louvores.core.security.headers import SecurityHeadersMiddleware
from src.louvores.core.security.tokens import Account, account_from_claims, decode_access_token

__all__ = [
    "Account",
    "SecurityHeadersMiddleware",
    "account_from_claims",
    "decode_access_token",
]
