"""Startup Seed — default admin accounts for the back-office.

Invariants:
    - Idempotent: an admin whose username already exists is skipped
    - Seeded passwords are hashed like any other password

Design Decisions:
    - Runs in lifespan, not in the storage constructor: tests get an empty store
      unless they ask for admins
"""

import logging

from hackerhire.core.domain_types import UserType
from hackerhire.core.entities import User
from hackerhire.core.repository_protocols import Storage
from hackerhire.infrastructure.passwords import hash_password

logger = logging.getLogger(__name__)

DEFAULT_ADMINS: tuple[dict, ...] = (
    {
        "username": "admin",
        "password": "admin123",
        "email": "admin@hackerhire.com",
        "full_name": "System Admin",
        "bio": "System Administrator",
    },
    {
        "username": "sihab",
        "password": "sihab123",
        "email": "sihab@hackerhire.com",
        "full_name": "Sihab Admin",
        "bio": "Custom Admin",
    },
)


async def seed_admin_users(
    storage: Storage, admins: tuple[dict, ...] = DEFAULT_ADMINS,
) -> list[User]:
    """Create missing admin accounts. Returns the ones created."""
    created = []
    for admin in admins:
        if await storage.users.get_by_username(admin["username"]):
            continue
        fields = {k: v for k, v in admin.items() if k != "password"}
        user = await storage.users.create({
            **fields,
            "password_hash": hash_password(admin["password"]),
            "user_type": UserType.ADMIN,
            "title": "Administrator",
            "is_verified": True,
        })
        created.append(user)
        logger.info(f"Seeded admin '{user.username}'", extra={"user_id": user.id})
    return created
