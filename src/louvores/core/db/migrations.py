"""Alembic runner used by deploy scripts and the integration suite."""

from alembic.config import Config

from alembic import command


def run_migrations_sync(revision: str = "head") -> None:
    """Upgrade the database to ``revision`` with the blocking Alembic engine."""
    alembic_cfg = Config("alembic.ini")
    command.upgrade(alembic_cfg, revision)
