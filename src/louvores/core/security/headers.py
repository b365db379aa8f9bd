"""Security headers middleware (Helmet-style)."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# Swagger UI (development only) needs inline scripts and CDN assets
DOCS_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
    "img-src 'self' data: fastapi.tiangolo.com; "
    "frame-ancestors 'none'"
)


def security_headers(content_security_policy: str, hsts: bool) -> dict[str, str]:
    """Headers added to every API response.

    The API only serves JSON, so the browser gets no permissions at all.
    """
    headers = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "no-referrer",
        "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
        "Cross-Origin-Opener-Policy": "same-origin",
    }
    if content_security_policy:
        headers["Content-Security-Policy"] = content_security_policy
    if hsts:
        headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    return headers


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, content_security_policy: str = DOCS_CSP, hsts: bool = True):
        super().__init__(app)
        self.headers = security_headers(content_security_policy, hsts)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers.update(self.headers)
        return response
