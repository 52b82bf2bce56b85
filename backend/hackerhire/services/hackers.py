"""Hackers — directory, featured cards, full profiles and profile extras.

Invariants:
    - Only users with user_type == hacker are ever returned or extended
    - Ratings and completed-project counts are recomputed from reviews and
      accepted applications on every request
    - Skills/certifications may be added only by the hacker themself or an admin
"""

import logging
from typing import Any

from hackerhire.core.domain_types import UserId, UserType
from hackerhire.core.entities import HackerCertification, HackerSkill, User
from hackerhire.core.errors import ForbiddenError, ResourceNotFoundError
from hackerhire.core.marketplace_views import featured_hacker, hacker_profile
from hackerhire.core.repository_protocols import Storage

logger = logging.getLogger(__name__)


async def get_hacker_or_404(storage: Storage, hacker_id: UserId) -> User:
    hacker = await storage.users.get(hacker_id)
    if hacker is None or hacker.user_type != UserType.HACKER.value:
        raise ResourceNotFoundError("Hacker", hacker_id)
    return hacker


async def list_hackers(storage: Storage) -> list[User]:
    return await storage.users.list_all(user_type=UserType.HACKER)


async def list_featured_hackers(storage: Storage) -> list[dict]:
    cards = []
    for hacker in await list_hackers(storage):
        cards.append(featured_hacker(
            hacker,
            await storage.hacker_skills.list_all(user_id=hacker.id),
            await storage.reviews.list_all(hacker_id=hacker.id),
        ))
    return cards


async def get_hacker_profile(storage: Storage, hacker_id: UserId) -> dict:
    hacker = await get_hacker_or_404(storage, hacker_id)
    reviews = await storage.reviews.list_all(hacker_id=hacker_id)
    applications = await storage.applications.list_all(hacker_id=hacker_id)

    review_clients = {}
    for review in reviews:
        if review.client_id not in review_clients:
            client = await storage.users.get(review.client_id)
            if client is not None:
                review_clients[review.client_id] = client
    projects = {}
    for application in applications:
        if application.project_id not in projects:
            project = await storage.projects.get(application.project_id)
            if project is not None:
                projects[application.project_id] = project

    return hacker_profile(
        hacker,
        await storage.hacker_skills.list_all(user_id=hacker_id),
        await storage.hacker_certifications.list_all(user_id=hacker_id),
        reviews,
        review_clients,
        applications,
        projects,
    )


def _check_can_edit(actor: User, hacker_id: UserId) -> None:
    if actor.user_type != UserType.ADMIN.value and actor.id != hacker_id:
        raise ForbiddenError("Only the hacker or an admin can edit this profile")


async def add_skill(
    storage: Storage, hacker_id: UserId, data: dict[str, Any], actor: User,
) -> HackerSkill:
    await get_hacker_or_404(storage, hacker_id)
    _check_can_edit(actor, hacker_id)
    skill = await storage.hacker_skills.create({**data, "user_id": hacker_id})
    logger.info(f"Skill '{skill.skill}' added", extra={"user_id": hacker_id})
    return skill


async def add_certification(
    storage: Storage, hacker_id: UserId, data: dict[str, Any], actor: User,
) -> HackerCertification:
    await get_hacker_or_404(storage, hacker_id)
    _check_can_edit(actor, hacker_id)
    certification = await storage.hacker_certifications.create(
        {**data, "user_id": hacker_id},
    )
    logger.info(
        f"Certification '{certification.name}' added", extra={"user_id": hacker_id},
    )
    return certification
