"""Client for the hosted identity provider's admin API."""

from typing import Any
from uuid import UUID

import httpx

from src.louvores.core.config import get_settings
from src.louvores.core.logging import get_logger
from src.louvores.core.security.tokens import Account

logger = get_logger(__name__)


class IdentityClient:
    """Looks up identity-provider accounts by id.

    Any failure (missing service key, transport error, non-2xx response) is
    logged and reported as "no account", so callers only deal with None.
    """

    def __init__(
        self,
        base_url: str,
        service_key: str | None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.service_key = service_key
        headers: dict[str, str] = {}
        if service_key:
            headers = {"apikey": service_key, "Authorization": f"Bearer {service_key}"}
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def get_account(self, account_id: UUID) -> Account | None:
        if not self.service_key:
            logger.error("IDENTITY_SERVICE_KEY not set - account lookup impossible")
            return None

        try:
            response = await self._client.get(f"/auth/v1/admin/users/{account_id}")
        except httpx.HTTPError as e:
            logger.error("Identity provider request failed", account_id=str(account_id), error=str(e))
            return None

        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        if response.is_error:
            logger.error(
                "Identity provider returned an error",
                account_id=str(account_id),
                status_code=response.status_code,
            )
            return None

        return _account_from_payload(response.json())

    async def aclose(self) -> None:
        await self._client.aclose()


def _account_from_payload(payload: dict[str, Any]) -> Account | None:
    # Admin API wraps the account in {"user": {...}} on some versions
    data = payload.get("user", payload)
    try:
        account_id = UUID(str(data.get("id")))
    except ValueError:
        return None
    email = data.get("email")
    metadata = data.get("user_metadata") or {}
    return Account(
        id=account_id,
        email=email.strip().lower() if email else None,
        name=metadata.get("name") or metadata.get("full_name"),
    )


_client: IdentityClient | None = None


def get_identity_client() -> IdentityClient:
    """Get or create the identity client singleton."""
    global _client
    if _client is None:
        settings = get_settings()
        _client = IdentityClient(
            base_url=settings.identity_url,
            service_key=settings.identity_service_key,
            timeout=settings.identity_timeout_seconds,
        )
    return _client


async def close_identity_client() -> None:
    """Close the identity client. Call during shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
