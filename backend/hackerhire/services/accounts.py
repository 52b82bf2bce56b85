"""Accounts — registration, credential checks, profile and user administration.

Invariants:
    - Username and email uniqueness checked case-insensitively BEFORE any insert/update
    - A uniqueness conflict leaves storage untouched
    - Passwords hashed here; storage only ever sees password_hash
    - authenticate() gives the same error for unknown user and wrong password

Design Decisions:
    - Uniqueness as a service-level scan, not a storage constraint: the memory
      backend has no constraints and both backends must reject identically
"""

import logging
from typing import Any

from hackerhire.core.domain_types import UserId
from hackerhire.core.entities import User
from hackerhire.core.errors import (
    IncorrectPasswordError, InvalidCredentialsError,
    ResourceNotFoundError, UniquenessConflictError,
)
from hackerhire.core.repository_protocols import Storage
from hackerhire.infrastructure.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


async def get_user_or_404(storage: Storage, user_id: UserId) -> User:
    user = await storage.users.get(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return user


async def ensure_unique(
    storage: Storage,
    username: str | None = None,
    email: str | None = None,
    exclude_id: UserId | None = None,
) -> None:
    """Raise UniquenessConflictError if another user holds username or email."""
    if username is not None:
        existing = await storage.users.get_by_username(username)
        if existing is not None and existing.id != exclude_id:
            raise UniquenessConflictError("username")
    if email is not None:
        existing = await storage.users.get_by_email(email)
        if existing is not None and existing.id != exclude_id:
            raise UniquenessConflictError("email")


async def register_user(storage: Storage, data: dict[str, Any]) -> User:
    """Create a user from validated input containing a plaintext `password`."""
    await ensure_unique(storage, data["username"], data["email"])
    fields = {k: v for k, v in data.items() if k != "password"}
    fields["password_hash"] = hash_password(data["password"])
    user = await storage.users.create(fields)
    logger.info(
        f"User '{user.username}' registered as {user.user_type}",
        extra={"user_id": user.id},
    )
    return user


async def authenticate(storage: Storage, username: str, password: str) -> User:
    user = await storage.users.get_by_username(username)
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user


async def update_user(
    storage: Storage, user_id: UserId, changes: dict[str, Any],
) -> User:
    """Shallow-merge changes onto a user; re-checks uniqueness for changed identifiers."""
    await get_user_or_404(storage, user_id)
    await ensure_unique(
        storage, changes.get("username"), changes.get("email"), exclude_id=user_id,
    )
    fields = {
        k: v for k, v in changes.items() if v is not None or k in User.NULLABLE
    }
    if "password" in fields:
        fields["password_hash"] = hash_password(fields.pop("password"))
    updated = await storage.users.update(user_id, fields)
    if updated is None:
        raise ResourceNotFoundError("User", user_id)
    return updated


async def change_password(
    storage: Storage, user: User, current_password: str, new_password: str,
) -> None:
    if not verify_password(current_password, user.password_hash):
        raise IncorrectPasswordError()
    await storage.users.update(user.id, {"password_hash": hash_password(new_password)})
    logger.info("Password changed", extra={"user_id": user.id})


async def delete_user(storage: Storage, user_id: UserId) -> None:
    """Remove the user row only; their projects, reviews and applications stay."""
    if not await storage.users.delete(user_id):
        raise ResourceNotFoundError("User", user_id)
    logger.info(f"User {user_id} deleted", extra={"user_id": user_id})
