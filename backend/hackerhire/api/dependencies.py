"""Request Dependencies — injected store and session-based principals.

Invariants:
    - Storage comes from app.state (set by create_app), never from a module global
    - Session cookie holds only the user id; the user is re-read from storage per request
    - A session pointing at a deleted user is cleared and treated as anonymous

Design Decisions:
    - Starlette SessionMiddleware (signed cookie) over JWT: browser client already
      relies on cookie sessions (ADR: session auth)
    - Role checks as dependency chains: require_admin builds on get_current_user
"""

from fastapi import Depends, Request

from hackerhire.core.domain_types import UserType
from hackerhire.core.entities import User
from hackerhire.core.errors import AuthenticationRequiredError, ForbiddenError
from hackerhire.core.repository_protocols import Storage

SESSION_USER_KEY = "user_id"


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def start_session(request: Request, user: User) -> None:
    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id


def end_session(request: Request) -> None:
    request.session.clear()


async def get_current_user(
    request: Request, storage: Storage = Depends(get_storage),
) -> User:
    """Session principal or 401."""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        raise AuthenticationRequiredError()
    user = await storage.users.get(user_id)
    if user is None:
        end_session(request)
        raise AuthenticationRequiredError()
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.user_type != UserType.ADMIN.value:
        raise ForbiddenError("Admin access required")
    return user


async def require_client(user: User = Depends(get_current_user)) -> User:
    if user.user_type != UserType.CLIENT.value:
        raise ForbiddenError("Access denied. Only clients can view this dashboard.")
    return user
