"""Testimonial Routes — public cards and admin curation.

Invariants:
    - Public listing resolves Testimonial → Review → client, skipping dangling links
    - ?featured=true narrows to curated entries
"""

from fastapi import APIRouter, Depends, status

from hackerhire.api.dependencies import get_storage, require_admin
from hackerhire.core.entities import User
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas import engagement as schemas
from hackerhire.services import engagements

router = APIRouter(prefix="/api/testimonials", tags=["testimonials"])


@router.get("")
async def list_testimonials(
    featured: bool = False, storage: Storage = Depends(get_storage),
):
    return await engagements.list_testimonials(storage, featured)


@router.post(
    "", response_model=schemas.TestimonialResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_testimonial(
    body: schemas.TestimonialCreate,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return await engagements.create_testimonial(
        storage, body.review_id, body.is_featured,
    )


@router.patch("/{testimonial_id}", response_model=schemas.TestimonialResponse)
async def update_testimonial(
    testimonial_id: int,
    body: schemas.TestimonialUpdate,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return await engagements.set_testimonial_featured(
        storage, testimonial_id, body.is_featured,
    )
