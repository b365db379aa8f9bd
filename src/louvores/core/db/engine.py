"""Database engine management."""

import ssl
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.louvores.core.config import get_settings

_engine: AsyncEngine | None = None

# ssl mode -> (check_hostname, verify_mode); "disable" means no TLS at all
_SSL_MODES: dict[str, tuple[bool, ssl.VerifyMode]] = {
    "prefer": (False, ssl.CERT_NONE),
    "require": (False, ssl.CERT_NONE),
    "verify-ca": (False, ssl.CERT_REQUIRED),
    "verify-full": (True, ssl.CERT_REQUIRED),
}


def build_ssl_context(ssl_mode: str) -> ssl.SSLContext | None:
    """SSL context for asyncpg from a libpq-style ``sslmode`` value.

    Hosted Postgres poolers usually present certificates that do not match
    the pooler hostname, hence ``require`` skips verification like libpq does.
    """
    if ssl_mode == "disable":
        return None
    if ssl_mode not in _SSL_MODES:
        raise ValueError(f"Unknown DATABASE_SSL_MODE: {ssl_mode}")
    check_hostname, verify_mode = _SSL_MODES[ssl_mode]
    context = ssl.create_default_context()
    context.check_hostname = check_hostname
    context.verify_mode = verify_mode
    return context


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        connect_args: dict[str, Any] = {}
        ssl_context = build_ssl_context(settings.database_ssl_mode)
        if ssl_context is not None:
            connect_args["ssl"] = ssl_context
        _engine = create_async_engine(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None


def get_sync_url() -> str:
    """Blocking (psycopg) URL for Alembic, derived from the asyncpg one."""
    return get_settings().database_url.replace("+asyncpg", "+psycopg")
