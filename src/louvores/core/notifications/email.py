"""Email client using Resend API."""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from datetime import datetime

import resend

from src.louvores.core.config import get_settings
from src.louvores.core.logging import get_logger

logger = get_logger(__name__)

# Thread pool for email sending with timeout support
_email_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="email_sender")

_BODY_STYLE = (
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; "
    "line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;"
)
_BUTTON_STYLE = (
    "background-color: #7c3aed; color: white; padding: 12px 24px; "
    "text-decoration: none; border-radius: 6px; display: inline-block; font-weight: 500;"
)
_MUTED_STYLE = "color: #666; font-size: 14px;"


def send_invite_email(to: str, name: str, link: str, expires_at: datetime) -> bool:
    """Send the access invitation email.

    Args:
        to: Recipient email address
        name: Invitee name for personalization
        link: Acceptance link containing the invitation token
        expires_at: When the invitation stops being valid (UTC)

    Returns:
        True if email was sent (or logged in dev mode), False on error.
        Never raises.
    """
    settings = get_settings()

    if not settings.resend_api_key:
        logger.warning(
            "RESEND_API_KEY not set - invite email not sent",
            to=to,
            email_type="invite",
        )
        return True

    resend.api_key = settings.resend_api_key

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [to],
                "subject": f"Convite para acessar o {settings.app_name}",
                "html": _get_invite_email_html(name, link, expires_at, settings.app_name),
            }
        )

    try:
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("Invite email sent", to=to)
        return True
    except FuturesTimeoutError:
        logger.error("Email send timed out", to=to, timeout=settings.email_send_timeout_seconds)
        return False
    except Exception as e:
        logger.error("Failed to send invite email", to=to, error=str(e))
        return False


def _get_invite_email_html(name: str, link: str, expires_at: datetime, app_name: str) -> str:
    safe_name = html.escape(name)
    safe_link = html.escape(link, quote=True)
    expires = expires_at.strftime("%d/%m/%Y")
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="{_BODY_STYLE}">
    <h1 style="color: #7c3aed; margin-bottom: 24px;">Você foi convidado!</h1>
    <p>Olá {safe_name},</p>
    <p>Você recebeu acesso ao <strong>{html.escape(app_name)}</strong>.
    Clique no botão abaixo para criar sua conta e aceitar o convite:</p>
    <p style="margin: 32px 0;">
        <a href="{safe_link}" style="{_BUTTON_STYLE}">Aceitar convite</a>
    </p>
    <p style="{_MUTED_STYLE}">
        Ou copie e cole este link no navegador:<br>
        <a href="{safe_link}">{safe_link}</a>
    </p>
    <p style="{_MUTED_STYLE} margin-top: 32px;">
        Este convite expira em {expires}. Se você não esperava este convite,
        pode ignorar este email.
    </p>
</body>
</html>"""
