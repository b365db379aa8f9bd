"""Database utilities - engine, session, migrations."""

from src.louvores.core.db.engine import (
    build_ssl_context,
    dispose_engine,
    get_engine,
    get_sync_url,
)
from src.louvores.core.db.migrations import run_migrations_sync
from src.louvores.core.db.session import get_session

__all__ = [
    # Engine
    "build_ssl_context",
    "dispose_engine",
    "get_engine",
    "get_sync_url",
    # Session
    "get_session",
    # Migrations
    "run_migrations_sync",
]
