"""Timestamp helpers shared by the table models.

Columns are ``TIMESTAMP WITHOUT TIME ZONE`` holding UTC, so every value
handled in Python is a naive datetime.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def has_passed(moment: datetime) -> bool:
    """True once ``moment`` (naive UTC) is now or in the past."""
    return moment <= utc_now()
