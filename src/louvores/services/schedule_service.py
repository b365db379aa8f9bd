"""Schedule aggregation: one denormalized view of a service's roster."""

from datetime import date
from uuid import UUID

from src.louvores.core.logging import get_logger
from src.louvores.models import Person, RoleTag, ScheduledFunction
from src.louvores.repositories import (
    PersonRepository,
    RoleTagRepository,
    ScheduleRepository,
    SongRepository,
)
from src.louvores.schemas.schedule import (
    CategoryGroup,
    ScheduledFunctionView,
    ScheduleView,
    SongView,
)

logger = get_logger(__name__)

CATEGORY_ORDER: tuple[str, ...] = (
    "lideranca_pastor",
    "lideranca_presbitero",
    "lideranca_diacono",
    "lideranca",
    "louvor_lideranca",
    "louvor_vocal",
    "vocal",
    "louvor_instrumento",
    "instrumento",
    "tecnica",
    "tecnico_audio",
    "tecnico_video",
    "ministerio_infantil",
    "apoio_seguranca",
    "apoio_geral",
    "apoio",
)

CATEGORY_LABELS: dict[str, str] = {
    "lideranca_pastor": "Pastor",
    "lideranca_presbitero": "Presbítero",
    "lideranca_diacono": "Diácono",
    "lideranca": "Liderança",
    "louvor_lideranca": "Ministração",
    "louvor_vocal": "Vozes",
    "vocal": "Vozes",
    "louvor_instrumento": "Instrumentos",
    "instrumento": "Instrumentos",
    "tecnica": "Técnica",
    "tecnico_audio": "Áudio",
    "tecnico_video": "Vídeo",
    "ministerio_infantil": "Ministério Infantil",
    "apoio_seguranca": "Segurança",
    "apoio_geral": "Apoio",
    "apoio": "Apoio",
}

MISSING_TAG_NAME = "Função não encontrada"
MISSING_TAG_CATEGORY = "apoio"
MISSING_TAG_COLOR = "#64748b"
MISSING_PERSON_NAME = "Nome não encontrado"


def group_by_category(functions: list[ScheduledFunctionView]) -> list[CategoryGroup]:
    """Group functions in the fixed category order.

    Categories outside the known list follow it, in first-seen order.
    Function order inside a group is preserved.
    """
    buckets: dict[str, list[ScheduledFunctionView]] = {}
    for function in functions:
        buckets.setdefault(function.category, []).append(function)

    ordered = [category for category in CATEGORY_ORDER if category in buckets]
    ordered += [category for category in buckets if category not in CATEGORY_LABELS]
    return [
        CategoryGroup(
            category=category,
            label=CATEGORY_LABELS.get(category, category),
            functions=buckets[category],
        )
        for category in ordered
    ]


class ScheduleService:
    def __init__(
        self,
        schedule_repo: ScheduleRepository,
        tag_repo: RoleTagRepository,
        person_repo: PersonRepository,
        song_repo: SongRepository,
    ):
        self.schedule_repo = schedule_repo
        self.tag_repo = tag_repo
        self.person_repo = person_repo
        self.song_repo = song_repo

    async def get_by_date(self, service_date: date) -> ScheduleView | None:
        """Build the schedule view for a date, or None when there is no schedule.

        Dangling tag or person references render as placeholders.
        """
        schedule = await self.schedule_repo.get_by_date(service_date)
        if schedule is None:
            return None

        functions = await self.schedule_repo.list_functions(schedule.id)
        tags = await self.tag_repo.get_many_by_ids(f.tag_id for f in functions if f.tag_id)
        people = await self.person_repo.get_many_by_ids(
            f.person_id for f in functions if f.person_id
        )

        views = [self._function_view(f, tags, people) for f in functions]
        songs = await self._songs(schedule.service_id) if schedule.service_id else []

        logger.debug(
            "Schedule aggregated",
            schedule_id=str(schedule.id),
            functions=len(views),
            songs=len(songs),
        )
        return ScheduleView(
            id=schedule.id,
            service_date=schedule.service_date,
            title=schedule.title,
            status=schedule.status,
            groups=group_by_category(views),
            songs=songs,
            total_assigned=len(views),
            total_confirmed=sum(1 for view in views if view.confirmed),
        )

    @staticmethod
    def _function_view(
        function: ScheduledFunction,
        tags: dict[UUID, RoleTag],
        people: dict[UUID, Person],
    ) -> ScheduledFunctionView:
        tag = tags.get(function.tag_id) if function.tag_id else None
        person = people.get(function.person_id) if function.person_id else None
        return ScheduledFunctionView(
            id=function.id,
            tag_id=function.tag_id,
            tag_name=tag.name if tag else MISSING_TAG_NAME,
            category=tag.category if tag else MISSING_TAG_CATEGORY,
            color=(tag.color if tag else None) or MISSING_TAG_COLOR,
            person_id=function.person_id,
            person_name=person.name if person else MISSING_PERSON_NAME,
            person_email=(person.email if person else None) or "",
            display_order=function.display_order,
            confirmed=function.confirmed,
        )

    async def _songs(self, service_id: UUID) -> list[SongView]:
        items = await self.song_repo.list_service_items(service_id)
        songs = await self.song_repo.get_many_by_ids(i.song_id for i in items if i.song_id)
        views = []
        for item in items:
            song = songs.get(item.song_id) if item.song_id else None
            if song is None:
                continue
            views.append(
                SongView(
                    id=song.id,
                    name=song.name,
                    tags=list(song.tags or []),
                    youtube_url=song.youtube_url,
                    spotify_url=song.spotify_url,
                    display_order=item.display_order,
                )
            )
        return views
