"""Tests for skill tag grouping and toggling."""

from uuid import uuid4

import pytest

from src.louvores.core.exceptions import NotFoundError
from src.louvores.services import TagService
from tests.factories import PersonFactory, RoleTagFactory
from tests.fakes import (
    FakePersonRepository,
    FakePersonTagRepository,
    FakeRoleTagRepository,
    InMemoryStore,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def service(store: InMemoryStore, mock_session) -> TagService:
    return TagService(
        tag_repo=FakeRoleTagRepository(mock_session, store),
        person_tag_repo=FakePersonTagRepository(mock_session, store),
        person_repo=FakePersonRepository(mock_session, store),
        session=mock_session,
    )


@pytest.fixture
def person(store: InMemoryStore):
    person = PersonFactory.build()
    store.people[person.id] = person
    return person


@pytest.fixture
def tag(store: InMemoryStore):
    tag = RoleTagFactory.build()
    store.tags[tag.id] = tag
    return tag


class TestToggle:
    async def test_toggle_assigns_then_removes(self, service, store, person, tag):
        assert await service.toggle(person.id, tag.id) is True
        assert store.person_tags[(person.id, tag.id)].skill_level == 1

        assert await service.toggle(person.id, tag.id) is False
        assert store.person_tags == {}

    async def test_inactive_tag_cannot_be_assigned(self, service, store, person):
        tag = RoleTagFactory.build(active=False)
        store.tags[tag.id] = tag

        with pytest.raises(NotFoundError):
            await service.toggle(person.id, tag.id)

    async def test_unknown_person(self, service, tag, mock_session):
        with pytest.raises(NotFoundError):
            await service.toggle(uuid4(), tag.id)
        mock_session.rollback.assert_awaited_once()


class TestListGrouped:
    async def test_groups_active_tags_by_category(self, service, store):
        tags = [
            RoleTagFactory.build(name="Baixo", category="louvor_instrumento", display_order=2),
            RoleTagFactory.build(name="Soprano", category="louvor_vocal", display_order=1),
            RoleTagFactory.build(name="Teclado", category="louvor_instrumento", display_order=3),
            RoleTagFactory.build(name="Antigo", category="apoio", active=False),
        ]
        store.tags.update({t.id: t for t in tags})

        groups = await service.list_grouped()

        assert [(c, [t.name for t in ts]) for c, ts in groups] == [
            ("louvor_vocal", ["Soprano"]),
            ("louvor_instrumento", ["Baixo", "Teclado"]),
        ]
