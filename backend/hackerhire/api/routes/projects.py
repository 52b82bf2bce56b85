"""Project Routes — browse, post, update and delete projects.

Invariants:
    - /bulk-delete is declared before /{project_id} so it is never read as an id
    - Create/update bodies validated before any storage mutation
    - Deletes (single and bulk) are admin-only and never cascade
"""

from fastapi import APIRouter, Depends, Query, status

from hackerhire.api.dependencies import get_current_user, get_storage, require_admin
from hackerhire.core.domain_types import ProjectStatus
from hackerhire.core.entities import User
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas.project import BulkDeleteRequest, ProjectCreate, ProjectUpdate
from hackerhire.services import projects as project_service

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("")
async def list_projects(
    status_filter: ProjectStatus | None = Query(None, alias="status"),
    storage: Storage = Depends(get_storage),
):
    """All projects with skills and client display name."""
    return await project_service.list_projects(
        storage, status_filter.value if status_filter else None,
    )


@router.post("/bulk-delete")
async def bulk_delete_projects(
    body: BulkDeleteRequest,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    count = await project_service.bulk_delete_projects(storage, body.ids)
    return {"message": f"{count} projects deleted successfully", "count": count}


@router.get("/{project_id}")
async def get_project(project_id: int, storage: Storage = Depends(get_storage)):
    return await project_service.get_project_detail(storage, project_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectCreate,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    return await project_service.create_project(
        storage, body.model_dump(exclude={"skills"}), body.skills, user,
    )


@router.patch("/{project_id}")
async def update_project(
    project_id: int,
    body: ProjectUpdate,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    return await project_service.update_project(
        storage, project_id, body.model_dump(exclude_unset=True), user,
    )


@router.delete("/{project_id}")
async def delete_project(
    project_id: int,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    await project_service.delete_project(storage, project_id)
    return {"message": "Project deleted successfully"}
