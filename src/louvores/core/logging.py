"""Logging configuration using structlog.

Invitation tokens are bearer credentials: any event key named ``token`` is
masked before rendering.
"""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars
from structlog.typing import EventDict, WrappedLogger

_SECRET_KEYS = frozenset({"token", "access_token", "authorization"})


def mask_secrets(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Keep the first 6 characters of secret values, mask the rest."""
    for key in _SECRET_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str) and value:
            event_dict[key] = f"{value[:6]}..."
    return event_dict


def setup_logging(debug: bool = False) -> None:
    """Configure structlog over the standard library.

    Args:
        debug: Colored console output when True, JSON lines otherwise.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    renderer: structlog.typing.Processor = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer(ensure_ascii=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            mask_secrets,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for noisy in ("sqlalchemy.engine", "httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(
    request_id: str | None, method: str | None = None, path: str | None = None
) -> None:
    """Bind request_id (and the route, when given) to subsequent log calls."""
    if request_id:
        bind_contextvars(request_id=request_id)
    if method and path:
        bind_contextvars(method=method, path=path)


def bind_account_context(account_id: UUID, email: str | None = None) -> None:
    """Bind the authenticated account to all subsequent log calls.

    Args:
        account_id: The identity-provider account id.
        email: Optional account email.
               Only logged if settings.log_user_emails is True (LGPD compliance).
    """
    from src.louvores.core.config import get_settings

    bind_contextvars(account_id=str(account_id))
    if email and get_settings().log_user_emails:
        bind_contextvars(account_email=email)


def clear_request_context() -> None:
    clear_contextvars()
