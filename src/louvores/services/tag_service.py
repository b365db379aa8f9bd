"""Skill tag catalogue and person/tag assignment."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.louvores.core.exceptions import NotFoundError, ServiceError
from src.louvores.core.logging import get_logger
from src.louvores.models import RoleTag
from src.louvores.repositories import PersonRepository, PersonTagRepository, RoleTagRepository

logger = get_logger(__name__)


class TagService:
    def __init__(
        self,
        tag_repo: RoleTagRepository,
        person_tag_repo: PersonTagRepository,
        person_repo: PersonRepository,
        session: AsyncSession,
    ):
        self.tag_repo = tag_repo
        self.person_tag_repo = person_tag_repo
        self.person_repo = person_repo
        self.session = session

    async def list_grouped(self) -> list[tuple[str, list[RoleTag]]]:
        """Active tags grouped by category, groups in order of first appearance."""
        groups: dict[str, list[RoleTag]] = {}
        for tag in await self.tag_repo.list_active():
            groups.setdefault(tag.category, []).append(tag)
        return list(groups.items())

    async def toggle(self, person_id: UUID, tag_id: UUID) -> bool:
        """Remove the tag from the person if assigned, otherwise assign it.

        Returns True when the tag ends up assigned.
        """
        try:
            person = await self.person_repo.get_by_id(person_id)
            if person is None:
                raise NotFoundError("Pessoa não encontrada")

            link = await self.person_tag_repo.get(person_id, tag_id)
            if link is not None:
                await self.person_tag_repo.remove(link)
                assigned = False
            else:
                tag = await self.tag_repo.get_by_id(tag_id)
                if tag is None or not tag.active:
                    raise NotFoundError("Função não encontrada")
                await self.person_tag_repo.add(person_id, tag_id, skill_level=1)
                assigned = True

            await self.session.commit()

        except ServiceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to toggle tag", person_id=str(person_id), error=str(e))
            raise

        logger.info(
            "Skill tag toggled", person_id=str(person_id), tag_id=str(tag_id), assigned=assigned
        )
        return assigned
