"""Person and AccessRecord factories."""

from uuid import uuid4

from polyfactory import Use

from src.louvores.models import AccessRecord, Person, Role, utc_now
from tests.factories.base import BaseFactory


class PersonFactory(BaseFactory):
    """Ghost person (no access) by default."""

    __model__ = Person

    id = Use(uuid4)
    name = "Maria Silva"
    role = Role.MEMBER.value
    email = Use(lambda: f"{uuid4().hex[:10]}@example.com")
    phone = "92981394605"
    active = True
    has_access = False
    account_id = None
    photo_url = None
    notes = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def with_access(cls, **kwargs):
        """Person already linked to an account."""
        account_id = kwargs.pop("account_id", None) or uuid4()
        return cls.build(has_access=True, account_id=account_id, **kwargs)


class AccessRecordFactory(BaseFactory):
    __model__ = AccessRecord

    id = Use(uuid4)
    person_id = None
    email = Use(lambda: f"{uuid4().hex[:10]}@example.com")
    name = "Maria Silva"
    role = Role.MEMBER.value
    phone = None
    active = True
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
