"""Client Routes — a client's projects and the client dashboard."""

from fastapi import APIRouter, Depends

from hackerhire.api.dependencies import get_storage, require_client
from hackerhire.core.entities import User
from hackerhire.core.repository_protocols import Storage
from hackerhire.services.dashboard import build_client_dashboard
from hackerhire.services.projects import list_client_projects

router = APIRouter(prefix="/api", tags=["clients"])


@router.get("/clients/{client_id}/projects")
async def client_projects(client_id: int, storage: Storage = Depends(get_storage)):
    return await list_client_projects(storage, client_id)


@router.get("/client/dashboard")
async def client_dashboard(
    client: User = Depends(require_client),
    storage: Storage = Depends(get_storage),
):
    """Stats, active projects and notifications for the session client."""
    return await build_client_dashboard(storage, client)
