"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import PersonFactory, InvitationFactory, ...
"""

from tests.factories.base import BaseFactory
from tests.factories.invitation import InvitationFactory
from tests.factories.person import AccessRecordFactory, PersonFactory
from tests.factories.schedule import (
    RoleTagFactory,
    ScheduledFunctionFactory,
    ScheduleFactory,
    ServiceSongItemFactory,
    SongFactory,
)

__all__ = [
    # Base
    "BaseFactory",
    # People
    "AccessRecordFactory",
    "PersonFactory",
    # Invitations
    "InvitationFactory",
    # Schedules
    "RoleTagFactory",
    "ScheduleFactory",
    "ScheduledFunctionFactory",
    "ServiceSongItemFactory",
    "SongFactory",
]
