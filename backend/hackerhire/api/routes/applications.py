"""Application Routes — hackers apply to projects; admins and owners decide."""

from fastapi import APIRouter, Depends, Query, status

from hackerhire.api.dependencies import get_current_user, get_storage, require_admin
from hackerhire.core.domain_types import ApplicationStatus
from hackerhire.core.entities import User
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas.engagement import (
    ApplicationCreate, ApplicationDecision, ApplicationResponse,
)
from hackerhire.services import engagements

router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.post(
    "", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED,
)
async def submit_application(
    body: ApplicationCreate, storage: Storage = Depends(get_storage),
):
    """Apply to a project. Project and hacker must exist; status starts pending."""
    return await engagements.submit_application(storage, body.model_dump())


@router.get("", response_model=list[ApplicationResponse])
async def list_applications(
    status_filter: ApplicationStatus | None = Query(None, alias="status"),
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return await engagements.list_applications(
        storage, status_filter.value if status_filter else None,
    )


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def decide_application(
    application_id: int,
    body: ApplicationDecision,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    return await engagements.decide_application(
        storage, application_id, body.status, user,
    )
