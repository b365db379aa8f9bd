"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.louvores.core.config import Settings
from src.louvores.core.security import SecurityHeadersMiddleware
from src.louvores.core.security.headers import DOCS_CSP

from .logging_context import logging_context_middleware

__all__ = [
    "setup_middlewares",
    "logging_context_middleware",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Middleware order matters - the last one added is the outermost.
    """

    @app.middleware("http")
    async def _logging_context(request, call_next):  # type: ignore[no-untyped-def]
        return await logging_context_middleware(request, call_next)

    # Local development serves Swagger UI over plain HTTP
    development = settings.app_env == "development"
    app.add_middleware(
        SecurityHeadersMiddleware,
        content_security_policy=DOCS_CSP if development else settings.csp_production or DOCS_CSP,
        hsts=not development,
    )

    # Browser frontend at APP_URL calls the API with the bearer token
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Correlation ID - generates/propagates X-Request-ID (outermost)
    app.add_middleware(CorrelationIdMiddleware)
