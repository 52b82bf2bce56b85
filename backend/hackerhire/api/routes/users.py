"""User Routes — directory reads and admin-only user management."""

from fastapi import APIRouter, Depends, Query, status

from hackerhire.api.dependencies import get_storage, require_admin
from hackerhire.core.domain_types import UserType
from hackerhire.core.entities import User
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas.user import UserCreate, UserResponse, UserUpdate
from hackerhire.services.accounts import (
    delete_user, get_user_or_404, register_user, update_user,
)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    user_type: UserType | None = Query(None, alias="type"),
    storage: Storage = Depends(get_storage),
):
    filters = {"user_type": user_type} if user_type else {}
    return await storage.users.list_all(**filters)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    return await get_user_or_404(storage, user_id)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return await register_user(storage, body.model_dump())


@router.patch("/{user_id}", response_model=UserResponse)
async def patch_user(
    user_id: int,
    body: UserUpdate,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return await update_user(storage, user_id, body.model_dump(exclude_unset=True))


@router.delete("/{user_id}")
async def remove_user(
    user_id: int,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    await delete_user(storage, user_id)
    return {"message": "User deleted successfully"}
