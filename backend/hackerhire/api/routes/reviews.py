"""Review Routes — clients rate hackers on a project."""

from fastapi import APIRouter, Depends, status

from hackerhire.api.dependencies import get_storage
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas.engagement import ReviewCreate, ReviewResponse
from hackerhire.services.engagements import submit_review

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(body: ReviewCreate, storage: Storage = Depends(get_storage)):
    return await submit_review(storage, body.model_dump())
