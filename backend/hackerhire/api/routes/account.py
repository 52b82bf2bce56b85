"""Account Routes — the session user's own summary, profile and password."""

from fastapi import APIRouter, Depends

from hackerhire.api.dependencies import get_current_user, get_storage
from hackerhire.core.entities import User
from hackerhire.core.marketplace_views import user_summary
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas.user import PasswordChange, ProfileUpdate, UserResponse
from hackerhire.services.accounts import change_password, update_user

router = APIRouter(prefix="/api/user", tags=["account"])


@router.get("")
async def current_user(user: User = Depends(get_current_user)):
    return user_summary(user)


@router.patch("/profile", response_model=UserResponse)
async def update_profile(
    body: ProfileUpdate,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """Update display fields; a changed email must not belong to another user."""
    return await update_user(storage, user.id, body.model_dump(exclude_unset=True))


@router.patch("/password")
async def update_password(
    body: PasswordChange,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    await change_password(storage, user, body.current_password, body.new_password)
    return {"message": "Password updated successfully"}
