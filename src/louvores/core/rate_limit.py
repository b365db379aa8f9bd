"""Rate limiting configuration (in-memory, per process)."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from src.louvores.core.config import get_settings
from src.louvores.core.logging import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Rate limit key from client IP only.

    User-controlled headers must never be part of the key, or rotating them
    would bypass the limit.
    """
    return get_remote_address(request) or "unknown"


def create_limiter() -> Limiter:
    """Create the rate limiter. Disabled in testing environment."""
    settings = get_settings()

    if settings.is_testing:
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    return Limiter(key_func=get_rate_limit_key)


def invite_rate_limit() -> str:
    return get_settings().invite_rate_limit


limiter = create_limiter()
