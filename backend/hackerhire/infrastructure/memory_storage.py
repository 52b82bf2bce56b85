"""In-Memory Storage — dict-backed implementation of the Storage protocol.

Invariants:
    - One dict per entity type; dict order IS insertion order (list_all relies on it)
    - Per-entity counter starts at 1 and only increments — ids never reused after delete
    - Lookups by foreign key are linear scans over the whole collection
    - get/update/delete on a missing id return None/False, never raise
    - Deleting a project does not cascade to skills, applications or reviews

Design Decisions:
    - Linear scans over secondary indexes: collections are small and the scan keeps
      ordering identical to list_all (ADR: demo-scale store)
    - create_project_with_skills undoes its own inserts on failure: the only
      multi-collection write gets all-or-nothing behaviour without a lock
    - State lives on the instance, never at module level: each app/test gets its own store
"""

import logging
from itertools import count
from typing import Any, Generic, Iterable, TypeVar

from hackerhire.core.entities import (
    User, Project, ProjectSkill, HackerSkill, HackerCertification,
    Review, Testimonial, Application, ContactMessage,
    prepare_insert, merge,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")


class MemoryRepository(Generic[E]):
    """CRUD over a single insertion-ordered dict."""

    def __init__(self, entity_type: type[E]):
        self._entity_type = entity_type
        self._rows: dict[int, E] = {}
        self._ids = count(1)

    async def create(self, data: dict[str, Any]) -> E:
        entity = self._entity_type(
            id=next(self._ids), **prepare_insert(self._entity_type, data),
        )
        self._rows[entity.id] = entity
        return entity

    async def get(self, entity_id: int) -> E | None:
        return self._rows.get(entity_id)

    async def list_all(self, **equals: Any) -> list[E]:
        return [
            row for row in self._rows.values()
            if all(getattr(row, k) == v for k, v in equals.items())
        ]

    async def update(self, entity_id: int, partial: dict[str, Any]) -> E | None:
        current = self._rows.get(entity_id)
        if current is None:
            return None
        updated = merge(current, partial)
        self._rows[entity_id] = updated
        return updated

    async def delete(self, entity_id: int) -> bool:
        return self._rows.pop(entity_id, None) is not None

    async def delete_many(self, entity_ids: Iterable[int]) -> int:
        deleted = 0
        for entity_id in entity_ids:
            if await self.delete(entity_id):
                deleted += 1
        return deleted


class MemoryUserRepository(MemoryRepository[User]):
    """Users plus case-insensitive login lookups."""

    def __init__(self):
        super().__init__(User)

    async def get_by_username(self, username: str) -> User | None:
        wanted = username.lower()
        return next(
            (u for u in self._rows.values() if u.username.lower() == wanted), None,
        )

    async def get_by_email(self, email: str) -> User | None:
        wanted = email.lower()
        return next(
            (u for u in self._rows.values() if u.email.lower() == wanted), None,
        )


class MemoryStorage:
    """Process-local store. Everything is lost on restart."""

    def __init__(self):
        self.users = MemoryUserRepository()
        self.projects: MemoryRepository[Project] = MemoryRepository(Project)
        self.project_skills: MemoryRepository[ProjectSkill] = MemoryRepository(ProjectSkill)
        self.hacker_skills: MemoryRepository[HackerSkill] = MemoryRepository(HackerSkill)
        self.hacker_certifications: MemoryRepository[HackerCertification] = (
            MemoryRepository(HackerCertification)
        )
        self.reviews: MemoryRepository[Review] = MemoryRepository(Review)
        self.testimonials: MemoryRepository[Testimonial] = MemoryRepository(Testimonial)
        self.applications: MemoryRepository[Application] = MemoryRepository(Application)
        self.contact_messages: MemoryRepository[ContactMessage] = (
            MemoryRepository(ContactMessage)
        )

    async def create_project_with_skills(
        self, data: dict[str, Any], skills: list[str],
    ) -> tuple[Project, list[ProjectSkill]]:
        """Create a project and its skill tags as one logical operation."""
        project: Project | None = None
        attached: list[ProjectSkill] = []
        try:
            project = await self.projects.create(data)
            for skill in skills:
                attached.append(await self.project_skills.create(
                    {"project_id": project.id, "skill": skill},
                ))
        except Exception:
            logger.error("Project creation failed, rolling back partial inserts")
            await self.project_skills.delete_many(s.id for s in attached)
            if project is not None:
                await self.projects.delete(project.id)
            raise
        return project, attached

    async def health_check(self) -> bool:
        return True
