"""Hacker Routes — directory, featured carousel, profiles and profile extras.

Invariants:
    - /featured is declared before /{hacker_id}
    - A non-hacker id answers 404, same as a missing one
"""

from fastapi import APIRouter, Depends, status

from hackerhire.api.dependencies import get_current_user, get_storage
from hackerhire.core.entities import User
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas.hacker import (
    HackerCertificationCreate, HackerCertificationResponse,
    HackerSkillCreate, HackerSkillResponse,
)
from hackerhire.schemas.user import UserResponse
from hackerhire.services import hackers as hacker_service

router = APIRouter(prefix="/api/hackers", tags=["hackers"])


@router.get("", response_model=list[UserResponse])
async def list_hackers(storage: Storage = Depends(get_storage)):
    return await hacker_service.list_hackers(storage)


@router.get("/featured")
async def featured_hackers(storage: Storage = Depends(get_storage)):
    return await hacker_service.list_featured_hackers(storage)


@router.get("/{hacker_id}")
async def hacker_profile(hacker_id: int, storage: Storage = Depends(get_storage)):
    return await hacker_service.get_hacker_profile(storage, hacker_id)


@router.post(
    "/{hacker_id}/skills",
    response_model=HackerSkillResponse, status_code=status.HTTP_201_CREATED,
)
async def add_skill(
    hacker_id: int,
    body: HackerSkillCreate,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    return await hacker_service.add_skill(storage, hacker_id, body.model_dump(), user)


@router.post(
    "/{hacker_id}/certifications",
    response_model=HackerCertificationResponse, status_code=status.HTTP_201_CREATED,
)
async def add_certification(
    hacker_id: int,
    body: HackerCertificationCreate,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    return await hacker_service.add_certification(
        storage, hacker_id, body.model_dump(), user,
    )
