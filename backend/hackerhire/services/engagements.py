"""Engagements — applications, reviews and curated testimonials.

Invariants:
    - Applications and reviews require an existing project AND an existing hacker
    - Applications are created pending; decisions follow the transition table
    - Only an admin or the project's owning client may decide an application
    - Testimonials point at an existing review; dangling ones are skipped on read
"""

import logging
from typing import Any

from hackerhire.core.domain_types import ApplicationId, ReviewId, UserType
from hackerhire.core.entities import Application, Review, Testimonial, User
from hackerhire.core.enforce_status import check_application_transition
from hackerhire.core.errors import ForbiddenError, ResourceNotFoundError
from hackerhire.core.marketplace_views import testimonial_card
from hackerhire.core.repository_protocols import Storage
from hackerhire.services.hackers import get_hacker_or_404
from hackerhire.services.projects import get_project_or_404

logger = logging.getLogger(__name__)


# ─── Applications ────────────────────────────────────────────────

async def submit_application(storage: Storage, data: dict[str, Any]) -> Application:
    await get_project_or_404(storage, data["project_id"])
    await get_hacker_or_404(storage, data["hacker_id"])
    application = await storage.applications.create(data)
    logger.info(
        f"Application submitted for project {application.project_id}",
        extra={
            "application_id": application.id,
            "project_id": application.project_id,
            "user_id": application.hacker_id,
        },
    )
    return application


async def list_applications(
    storage: Storage, status: str | None = None,
) -> list[Application]:
    filters = {"status": status} if status else {}
    return await storage.applications.list_all(**filters)


async def decide_application(
    storage: Storage, application_id: ApplicationId, status: str, actor: User,
) -> Application:
    application = await storage.applications.get(application_id)
    if application is None:
        raise ResourceNotFoundError("Application", application_id)
    if actor.user_type != UserType.ADMIN.value:
        project = await storage.projects.get(application.project_id)
        if project is None or project.client_id != actor.id:
            raise ForbiddenError("Only an admin or the project owner can decide")
    check_application_transition(application.status, status)
    updated = await storage.applications.update(application_id, {"status": status})
    logger.info(
        f"Application {application_id} {application.status} -> {status}",
        extra={"application_id": application_id, "user_id": actor.id},
    )
    return updated


# ─── Reviews ─────────────────────────────────────────────────────

async def submit_review(storage: Storage, data: dict[str, Any]) -> Review:
    await get_project_or_404(storage, data["project_id"])
    await get_hacker_or_404(storage, data["hacker_id"])
    review = await storage.reviews.create(data)
    logger.info(
        f"Review {review.id} rated {review.rating}",
        extra={"project_id": review.project_id, "user_id": review.hacker_id},
    )
    return review


# ─── Testimonials ────────────────────────────────────────────────

async def list_testimonials(storage: Storage, featured: bool = False) -> list[dict]:
    """Resolve each testimonial to review + client; skip dangling pointers."""
    filters = {"is_featured": True} if featured else {}
    cards = []
    for testimonial in await storage.testimonials.list_all(**filters):
        review = await storage.reviews.get(testimonial.review_id)
        client = await storage.users.get(review.client_id) if review else None
        card = testimonial_card(testimonial, review, client)
        if card is None:
            logger.debug(f"Skipping dangling testimonial {testimonial.id}")
            continue
        cards.append(card)
    return cards


async def create_testimonial(
    storage: Storage, review_id: ReviewId, is_featured: bool = False,
) -> Testimonial:
    if await storage.reviews.get(review_id) is None:
        raise ResourceNotFoundError("Review", review_id)
    return await storage.testimonials.create(
        {"review_id": review_id, "is_featured": is_featured},
    )


async def set_testimonial_featured(
    storage: Storage, testimonial_id: int, is_featured: bool,
) -> Testimonial:
    updated = await storage.testimonials.update(
        testimonial_id, {"is_featured": is_featured},
    )
    if updated is None:
        raise ResourceNotFoundError("Testimonial", testimonial_id)
    return updated
