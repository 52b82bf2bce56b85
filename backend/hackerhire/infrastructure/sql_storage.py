"""SQL Storage — SQLAlchemy implementation of the Storage protocol.

Invariants:
    - Returns the same core dataclasses as MemoryStorage, never ORM rows
    - list_all orders by id, which equals insertion order (autoincrement, never reused)
    - get/update/delete on a missing id return None/False, never raise
    - create_project_with_skills runs in ONE transaction: all rows or none
    - Datetimes read back without tzinfo (SQLite) are tagged UTC

Design Decisions:
    - One short-lived session per repository call: no unit-of-work spans requests
    - Equality filters via filter_by on indexed integer columns replace the memory
      backend's linear scans; ordering and filter semantics stay identical
"""

import logging
from dataclasses import fields
from datetime import datetime, timezone
from typing import Any, Generic, Iterable, TypeVar

from sqlalchemy import func, select

from hackerhire.core.entities import (
    User, Project, ProjectSkill, HackerSkill, HackerCertification,
    Review, Testimonial, Application, ContactMessage,
    prepare_insert, clean_partial,
)
from hackerhire.infrastructure.database import DatabaseSessionManager
from hackerhire.models.user import User as UserModel
from hackerhire.models.project import Project as ProjectModel
from hackerhire.models.project_skill import ProjectSkill as ProjectSkillModel
from hackerhire.models.hacker_skill import HackerSkill as HackerSkillModel
from hackerhire.models.hacker_certification import (
    HackerCertification as HackerCertificationModel,
)
from hackerhire.models.review import Review as ReviewModel
from hackerhire.models.testimonial import Testimonial as TestimonialModel
from hackerhire.models.application import Application as ApplicationModel
from hackerhire.models.contact_message import ContactMessage as ContactMessageModel

logger = logging.getLogger(__name__)

E = TypeVar("E")


def _as_utc(value: Any) -> Any:
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlRepository(Generic[E]):
    """CRUD for one entity family against one table."""

    def __init__(
        self, db: DatabaseSessionManager, model: type, entity_type: type[E],
    ):
        self._db = db
        self._model = model
        self._entity_type = entity_type

    def _to_entity(self, row: Any) -> E:
        return self._entity_type(**{
            f.name: _as_utc(getattr(row, f.name))
            for f in fields(self._entity_type)
        })

    async def create(self, data: dict[str, Any]) -> E:
        async with self._db.session() as db:
            row = self._model(**prepare_insert(self._entity_type, data))
            db.add(row)
            await db.commit()
            return self._to_entity(row)

    async def get(self, entity_id: int) -> E | None:
        async with self._db.session() as db:
            row = await db.get(self._model, entity_id)
            return self._to_entity(row) if row is not None else None

    async def list_all(self, **equals: Any) -> list[E]:
        query = (
            select(self._model)
            .filter_by(**clean_partial(self._entity_type, equals))
            .order_by(self._model.id)
        )
        async with self._db.session() as db:
            result = await db.execute(query)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def update(self, entity_id: int, partial: dict[str, Any]) -> E | None:
        async with self._db.session() as db:
            row = await db.get(self._model, entity_id)
            if row is None:
                return None
            for key, value in clean_partial(self._entity_type, partial).items():
                setattr(row, key, value)
            await db.commit()
            return self._to_entity(row)

    async def delete(self, entity_id: int) -> bool:
        async with self._db.session() as db:
            row = await db.get(self._model, entity_id)
            if row is None:
                return False
            await db.delete(row)
            await db.commit()
            return True

    async def delete_many(self, entity_ids: Iterable[int]) -> int:
        deleted = 0
        async with self._db.session() as db:
            # a row deleted earlier in this session is still visible to get() until flush
            for entity_id in dict.fromkeys(entity_ids):
                row = await db.get(self._model, entity_id)
                if row is None:
                    continue
                await db.delete(row)
                deleted += 1
            await db.commit()
        return deleted


class SqlUserRepository(SqlRepository[User]):
    """Users plus case-insensitive login lookups."""

    def __init__(self, db: DatabaseSessionManager):
        super().__init__(db, UserModel, User)

    async def _first_where(self, clause: Any) -> User | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(UserModel).where(clause).order_by(UserModel.id).limit(1),
            )
            row = result.scalars().first()
            return self._to_entity(row) if row is not None else None

    async def get_by_username(self, username: str) -> User | None:
        return await self._first_where(
            func.lower(UserModel.username) == username.lower(),
        )

    async def get_by_email(self, email: str) -> User | None:
        return await self._first_where(
            func.lower(UserModel.email) == email.lower(),
        )


class SqlStorage:
    """Durable store on any SQLAlchemy async URL (aiosqlite, asyncpg)."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db
        self.users = SqlUserRepository(db)
        self.projects = SqlRepository(db, ProjectModel, Project)
        self.project_skills = SqlRepository(db, ProjectSkillModel, ProjectSkill)
        self.hacker_skills = SqlRepository(db, HackerSkillModel, HackerSkill)
        self.hacker_certifications = SqlRepository(
            db, HackerCertificationModel, HackerCertification,
        )
        self.reviews = SqlRepository(db, ReviewModel, Review)
        self.testimonials = SqlRepository(db, TestimonialModel, Testimonial)
        self.applications = SqlRepository(db, ApplicationModel, Application)
        self.contact_messages = SqlRepository(
            db, ContactMessageModel, ContactMessage,
        )

    async def create_project_with_skills(
        self, data: dict[str, Any], skills: list[str],
    ) -> tuple[Project, list[ProjectSkill]]:
        """Insert project + skill rows in a single transaction."""
        async with self._db.session() as db:
            project_row = ProjectModel(**prepare_insert(Project, data))
            db.add(project_row)
            await db.flush()
            skill_rows = [
                ProjectSkillModel(**prepare_insert(
                    ProjectSkill, {"project_id": project_row.id, "skill": skill},
                ))
                for skill in skills
            ]
            db.add_all(skill_rows)
            await db.commit()
            logger.debug(
                f"Project {project_row.id} committed with {len(skill_rows)} skills",
                extra={"project_id": project_row.id},
            )
            return (
                self.projects._to_entity(project_row),
                [self.project_skills._to_entity(r) for r in skill_rows],
            )

    async def health_check(self) -> bool:
        return await self._db.health_check()

    async def dispose(self) -> None:
        await self._db.dispose()
