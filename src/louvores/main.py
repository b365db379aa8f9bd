import secrets
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text

from src.louvores.api.middlewares import setup_middlewares
from src.louvores.api.v1.router import api_router
from src.louvores.core.config import get_settings
from src.louvores.core.db import dispose_engine, get_session
from src.louvores.core.exceptions import setup_exception_handlers
from src.louvores.core.identity import close_identity_client
from src.louvores.core.logging import get_logger, setup_logging
from src.louvores.core.rate_limit import limiter

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", app_env=settings.app_env)

    yield

    logger.info("Closing connections...")
    await close_identity_client()
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "invitations", "description": "Access invitations (create, verify, accept)"},
    {"name": "people", "description": "People registry"},
    {"name": "tags", "description": "Skill tags and assignments"},
    {"name": "permissions", "description": "Capabilities of the current account"},
    {"name": "schedules", "description": "Service schedules"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Worship team roster, invitations and access control",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    setup_middlewares(app, settings)

    app.include_router(api_router)

    # Prometheus metrics instrumentation
    instrumentator = Instrumentator().instrument(app)

    # Protect /metrics endpoint if API key is configured
    if settings.metrics_api_key:
        api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

        async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
            if (
                api_key is None
                or settings.metrics_api_key is None
                or not secrets.compare_digest(api_key, settings.metrics_api_key)
            ):
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid or missing metrics API key",
                )

        instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
    else:
        instrumentator.expose(app, endpoint="/metrics")

    @app.get("/health")
    async def health() -> JSONResponse:
        """Health check with database validation."""
        health_status: dict[str, Any] = {"status": "healthy", "database": "unknown"}

        try:
            async with get_session() as session:
                await session.execute(text("SELECT 1"))
            health_status["database"] = "healthy"
        except Exception as e:
            logger.warning("Health check database failure", error=str(e))
            health_status["database"] = "unhealthy"
            health_status["status"] = "unhealthy"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)

    return app


app = create_app()
