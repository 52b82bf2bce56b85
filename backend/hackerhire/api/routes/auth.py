"""Auth Routes — signup, login, logout and the session principal.

Invariants:
    - Signup creates only client or hacker accounts, never admins
    - Successful signup and login both establish a session
    - Responses carry the user summary, never the password hash
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from hackerhire.api.dependencies import (
    end_session, get_current_user, get_storage, start_session,
)
from hackerhire.core.entities import User
from hackerhire.core.marketplace_views import user_summary
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas.user import LoginRequest, SignupRequest
from hackerhire.services.accounts import authenticate, register_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    body: SignupRequest, request: Request,
    storage: Storage = Depends(get_storage),
):
    user = await register_user(
        storage, body.model_dump(exclude={"terms_agreed"}),
    )
    start_session(request, user)
    return {"message": "User created successfully", "user": user_summary(user)}


@router.post("/login")
async def login(
    body: LoginRequest, request: Request,
    storage: Storage = Depends(get_storage),
):
    user = await authenticate(storage, body.username, body.password)
    start_session(request, user)
    logger.info(f"User '{user.username}' logged in", extra={"user_id": user.id})
    return user_summary(user)


@router.api_route("/logout", methods=["GET", "POST"])
async def logout(request: Request):
    end_session(request)
    return {"message": "Logged out successfully"}


@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    return user_summary(user)
