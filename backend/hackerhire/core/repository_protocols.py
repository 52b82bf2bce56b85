"""Boundary Protocols — contracts between core and the storage shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Missing ids are signalled by None / False, never by an exception
    - list_all() returns insertion order (ascending id) for every backend
    - Ids are strictly increasing per entity type and never reused

Design Decisions:
    - Protocol over ABC: structural subtyping, memory and SQL backends share no base class
      (ADR: ExMA anti-pattern)
    - One generic EntityRepository per entity family instead of one method per
      entity per verb: the CRUD contract is identical for all nine families
    - Async in Protocol: the SQL backend does IO; the memory backend satisfies the
      same signatures without awaiting anything
"""

from typing import Any, Iterable, Protocol, TypeVar

from hackerhire.core.entities import (
    User, Project, ProjectSkill, HackerSkill, HackerCertification,
    Review, Testimonial, Application, ContactMessage,
)

E = TypeVar("E")


class EntityRepository(Protocol[E]):
    """CRUD + equality-filtered listing for one entity family."""
    async def create(self, data: dict[str, Any]) -> E: ...
    async def get(self, entity_id: int) -> E | None: ...
    async def list_all(self, **equals: Any) -> list[E]: ...
    async def update(self, entity_id: int, partial: dict[str, Any]) -> E | None: ...
    async def delete(self, entity_id: int) -> bool: ...
    async def delete_many(self, entity_ids: Iterable[int]) -> int: ...


class UserRepository(EntityRepository[User], Protocol):
    """User lookups by login identifiers (case-insensitive)."""
    async def get_by_username(self, username: str) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...


class Storage(Protocol):
    """The whole store, injected into the app at construction time."""
    users: UserRepository
    projects: EntityRepository[Project]
    project_skills: EntityRepository[ProjectSkill]
    hacker_skills: EntityRepository[HackerSkill]
    hacker_certifications: EntityRepository[HackerCertification]
    reviews: EntityRepository[Review]
    testimonials: EntityRepository[Testimonial]
    applications: EntityRepository[Application]
    contact_messages: EntityRepository[ContactMessage]

    async def create_project_with_skills(
        self, data: dict[str, Any], skills: list[str],
    ) -> tuple[Project, list[ProjectSkill]]: ...

    async def health_check(self) -> bool: ...
