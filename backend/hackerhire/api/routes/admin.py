"""Admin Routes — back-office login and admin account creation.

Invariants:
    - Admin login with valid non-admin credentials → 403 and NO session
    - Only an existing admin may create another admin
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from hackerhire.api.dependencies import get_storage, require_admin, start_session
from hackerhire.core.domain_types import UserType
from hackerhire.core.entities import User
from hackerhire.core.errors import ForbiddenError
from hackerhire.core.marketplace_views import user_summary
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas.user import AdminCreate, LoginRequest
from hackerhire.services.accounts import authenticate, register_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/login")
async def admin_login(
    body: LoginRequest, request: Request,
    storage: Storage = Depends(get_storage),
):
    user = await authenticate(storage, body.username, body.password)
    if user.user_type != UserType.ADMIN.value:
        logger.warning(
            f"Non-admin '{user.username}' attempted admin login",
            extra={"user_id": user.id},
        )
        raise ForbiddenError("Access denied. Only admins can log in here.")
    start_session(request, user)
    return user_summary(user)


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_admin(
    body: AdminCreate,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    data = body.model_dump()
    data["user_type"] = UserType.ADMIN
    user = await register_user(storage, data)
    logger.info(
        f"Admin '{user.username}' created by '{admin.username}'",
        extra={"user_id": admin.id},
    )
    return {"message": "Admin user created successfully", "user": user_summary(user)}
