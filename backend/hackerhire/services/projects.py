"""Projects — listing with joins, creation with skills, status-guarded updates.

Invariants:
    - Listing attaches skills + client display name per project, recomputed per call
    - Creation of project + skills goes through Storage.create_project_with_skills
    - Status changes pass the transition table before anything is written
    - Only admins or the owning client may update a project
    - Deletes never cascade to skills, applications or reviews

Design Decisions:
    - N+1 lookups (skills, client) per listed project: matches the store's
      linear-scan model; no cache to invalidate (ADR: demo-scale store)
"""

import logging
from typing import Any

from hackerhire.core.domain_types import ProjectId, UserId, UserType
from hackerhire.core.entities import Project, User
from hackerhire.core.enforce_status import check_project_transition
from hackerhire.core.errors import ForbiddenError, ResourceNotFoundError
from hackerhire.core.marketplace_views import project_detail, project_listing
from hackerhire.core.repository_protocols import Storage

logger = logging.getLogger(__name__)


async def get_project_or_404(storage: Storage, project_id: ProjectId) -> Project:
    project = await storage.projects.get(project_id)
    if project is None:
        raise ResourceNotFoundError("Project", project_id)
    return project


async def skill_names(storage: Storage, project_id: ProjectId) -> list[str]:
    return [s.skill for s in await storage.project_skills.list_all(project_id=project_id)]


async def list_projects(storage: Storage, status: str | None = None) -> list[dict]:
    filters = {"status": status} if status else {}
    listings = []
    for project in await storage.projects.list_all(**filters):
        client = await storage.users.get(project.client_id)
        listings.append(project_listing(
            project, await skill_names(storage, project.id), client,
        ))
    return listings


async def get_project_detail(storage: Storage, project_id: ProjectId) -> dict:
    project = await get_project_or_404(storage, project_id)
    return project_detail(project, await skill_names(storage, project_id))


async def list_client_projects(storage: Storage, client_id: UserId) -> list[Project]:
    return await storage.projects.list_all(client_id=client_id)


async def create_project(
    storage: Storage, data: dict[str, Any], skills: list[str], author: User,
) -> dict:
    """Post a project. client_id defaults to the author; only admins may post for others."""
    fields = dict(data)
    client_id = fields.get("client_id") or author.id
    if client_id != author.id and author.user_type != UserType.ADMIN.value:
        raise ForbiddenError("Cannot post a project on behalf of another client")
    fields["client_id"] = client_id
    project, attached = await storage.create_project_with_skills(fields, skills)
    logger.info(
        f"Project '{project.title}' created with {len(attached)} skills",
        extra={"project_id": project.id, "user_id": author.id},
    )
    return project_detail(project, [s.skill for s in attached])


async def update_project(
    storage: Storage, project_id: ProjectId, changes: dict[str, Any], actor: User,
) -> dict:
    project = await get_project_or_404(storage, project_id)
    changes = {
        k: v for k, v in changes.items() if v is not None or k in Project.NULLABLE
    }
    if actor.user_type != UserType.ADMIN.value and project.client_id != actor.id:
        raise ForbiddenError("Only an admin or the project owner can update it")
    if "status" in changes:
        check_project_transition(project.status, changes["status"])
    updated = await storage.projects.update(project_id, changes)
    if updated is None:
        raise ResourceNotFoundError("Project", project_id)
    if updated.status != project.status:
        logger.info(
            f"Project {project_id} status {project.status} -> {updated.status}",
            extra={"project_id": project_id, "user_id": actor.id},
        )
    return project_detail(updated, await skill_names(storage, project_id))


async def delete_project(storage: Storage, project_id: ProjectId) -> None:
    if not await storage.projects.delete(project_id):
        raise ResourceNotFoundError("Project", project_id)
    logger.info(f"Project {project_id} deleted", extra={"project_id": project_id})


async def bulk_delete_projects(storage: Storage, project_ids: list[ProjectId]) -> int:
    """Delete each id independently; returns how many actually existed."""
    deleted = await storage.projects.delete_many(project_ids)
    logger.info(f"Bulk delete removed {deleted}/{len(project_ids)} projects")
    return deleted
