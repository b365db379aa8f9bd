"""Tests for schedule aggregation."""

from datetime import date
from uuid import uuid4

import pytest

from src.louvores.schemas.schedule import ScheduledFunctionView
from src.louvores.services import ScheduleService
from src.louvores.services.schedule_service import (
    MISSING_PERSON_NAME,
    MISSING_TAG_COLOR,
    MISSING_TAG_NAME,
    group_by_category,
)
from tests.factories import (
    PersonFactory,
    RoleTagFactory,
    ScheduledFunctionFactory,
    ScheduleFactory,
    ServiceSongItemFactory,
    SongFactory,
)
from tests.fakes import (
    FakePersonRepository,
    FakeRoleTagRepository,
    FakeScheduleRepository,
    FakeSongRepository,
    InMemoryStore,
)

pytestmark = pytest.mark.unit

SUNDAY = date(2026, 10, 18)


@pytest.fixture
def service(store: InMemoryStore, mock_session) -> ScheduleService:
    return ScheduleService(
        schedule_repo=FakeScheduleRepository(mock_session, store),
        tag_repo=FakeRoleTagRepository(mock_session, store),
        person_repo=FakePersonRepository(mock_session, store),
        song_repo=FakeSongRepository(mock_session, store),
    )


def _view(category: str, order: int = 0) -> ScheduledFunctionView:
    return ScheduledFunctionView(
        id=uuid4(),
        tag_id=None,
        tag_name=category,
        category=category,
        color="#000000",
        person_id=None,
        person_name="P",
        person_email="",
        display_order=order,
        confirmed=False,
    )


def _seed_schedule(store: InMemoryStore, **kwargs):
    schedule = ScheduleFactory.build(service_date=SUNDAY, **kwargs)
    store.schedules[schedule.id] = schedule
    return schedule


class TestGroupByCategory:
    def test_fixed_category_order(self):
        groups = group_by_category(
            [_view("apoio"), _view("louvor_vocal"), _view("lideranca_pastor"), _view("tecnica")]
        )
        assert [g.category for g in groups] == [
            "lideranca_pastor",
            "louvor_vocal",
            "tecnica",
            "apoio",
        ]
        assert groups[1].label == "Vozes"

    def test_unknown_categories_follow_known_ones(self):
        groups = group_by_category(
            [_view("zeladoria"), _view("instrumento"), _view("recepcao"), _view("zeladoria")]
        )
        assert [g.category for g in groups] == ["instrumento", "zeladoria", "recepcao"]
        assert groups[1].label == "zeladoria"
        assert len(groups[1].functions) == 2

    def test_order_within_group_is_preserved(self):
        first, second = _view("vocal", 1), _view("vocal", 0)
        (group,) = group_by_category([first, second])
        assert group.functions == [first, second]


class TestGetByDate:
    async def test_no_schedule_for_date(self, service):
        assert await service.get_by_date(SUNDAY) is None

    async def test_aggregates_functions_and_songs(self, service, store):
        schedule = _seed_schedule(store, service_id=uuid4())
        guitar = RoleTagFactory.build(name="Violão", category="louvor_instrumento")
        pastor_tag = RoleTagFactory.build(name="Pregador", category="lideranca_pastor")
        ana = PersonFactory.build(name="Ana", email="ana@example.com")
        pedro = PersonFactory.build(name="Pedro")
        store.tags.update({guitar.id: guitar, pastor_tag.id: pastor_tag})
        store.people.update({ana.id: ana, pedro.id: pedro})
        store.functions += [
            ScheduledFunctionFactory.build(
                schedule_id=schedule.id, tag_id=guitar.id, person_id=ana.id, display_order=1,
                confirmed=True,
            ),
            ScheduledFunctionFactory.build(
                schedule_id=schedule.id, tag_id=pastor_tag.id, person_id=pedro.id,
                display_order=2,
            ),
            ScheduledFunctionFactory.build(schedule_id=uuid4(), tag_id=guitar.id),
        ]
        hymn, chorus = SongFactory.build(name="Hino"), SongFactory.build(name="Coro")
        store.songs.update({hymn.id: hymn, chorus.id: chorus})
        store.song_items += [
            ServiceSongItemFactory.build(
                service_id=schedule.service_id, song_id=chorus.id, display_order=2
            ),
            ServiceSongItemFactory.build(
                service_id=schedule.service_id, song_id=hymn.id, display_order=1
            ),
        ]

        view = await service.get_by_date(SUNDAY)

        assert view.id == schedule.id
        assert view.total_assigned == 2
        assert view.total_confirmed == 1
        assert [g.category for g in view.groups] == ["lideranca_pastor", "louvor_instrumento"]
        guitar_view = view.groups[1].functions[0]
        assert guitar_view.person_name == "Ana"
        assert guitar_view.person_email == "ana@example.com"
        assert guitar_view.tag_name == "Violão"
        assert [s.name for s in view.songs] == ["Hino", "Coro"]

    async def test_dangling_references_render_placeholders(self, service, store):
        schedule = _seed_schedule(store)
        store.functions.append(
            ScheduledFunctionFactory.build(
                schedule_id=schedule.id, tag_id=uuid4(), person_id=uuid4()
            )
        )

        view = await service.get_by_date(SUNDAY)

        (group,) = view.groups
        function = group.functions[0]
        assert group.category == "apoio"
        assert function.tag_name == MISSING_TAG_NAME
        assert function.color == MISSING_TAG_COLOR
        assert function.person_name == MISSING_PERSON_NAME
        assert function.person_email == ""

    async def test_schedule_without_service_has_no_songs(self, service, store):
        _seed_schedule(store, service_id=None)

        view = await service.get_by_date(SUNDAY)

        assert view.songs == []
        assert view.groups == []
        assert view.total_assigned == 0

    async def test_deleted_songs_are_skipped(self, service, store):
        schedule = _seed_schedule(store, service_id=uuid4())
        store.song_items.append(
            ServiceSongItemFactory.build(service_id=schedule.service_id, song_id=uuid4())
        )

        view = await service.get_by_date(SUNDAY)

        assert view.songs == []
