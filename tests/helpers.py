"""Test helper functions for tokens and seeded data."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import jwt

from src.louvores.core.config import get_settings
from src.louvores.models import AccessRecord, Person, Role
from tests.factories import AccessRecordFactory, PersonFactory
from tests.fakes import InMemoryStore


def make_access_token(
    account_id: UUID | None = None,
    email: str | None = "membro@example.com",
    name: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
    audience: str | None = None,
    secret: str | None = None,
) -> str:
    """Mint an identity-provider style JWT signed with the test secret."""
    settings = get_settings()
    claims: dict = {
        "sub": str(account_id or uuid4()),
        "aud": audience or settings.identity_jwt_audience,
        "exp": int((datetime.now(UTC) + expires_in).timestamp()),
        "role": "authenticated",
    }
    if email is not None:
        claims["email"] = email
    if name is not None:
        claims["user_metadata"] = {"name": name}
    return jwt.encode(
        claims,
        secret or settings.identity_jwt_secret,
        algorithm=settings.identity_jwt_algorithm,
    )


def auth_headers(account_id: UUID, email: str | None = "membro@example.com") -> dict[str, str]:
    return {"Authorization": f"Bearer {make_access_token(account_id, email)}"}


def seed_member_with_access(
    store: InMemoryStore,
    role: Role = Role.MEMBER,
    active: bool = True,
    email: str | None = None,
) -> tuple[Person, AccessRecord]:
    """Person with access plus the matching access record.

    Args:
        store: In-memory database to seed
        role: Role of the person
        active: Whether the access record is active
        email: Optional email (random otherwise)

    Returns:
        Tuple of (person, access_record)
    """
    person = PersonFactory.with_access(role=role.value, **({"email": email} if email else {}))
    record = AccessRecordFactory.build(
        id=person.account_id,
        person_id=person.id,
        email=person.email,
        name=person.name,
        role=person.role,
        active=active,
    )
    store.people[person.id] = person
    store.access_records[record.id] = record
    return person, record
