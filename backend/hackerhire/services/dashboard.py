"""Client Dashboard — gathers a client's projects, applications and hackers.

All shaping happens in core/client_dashboard.py; this module only fetches.
"""

from datetime import datetime, timezone

from hackerhire.core.client_dashboard import compute_client_dashboard
from hackerhire.core.entities import User
from hackerhire.core.repository_protocols import Storage


async def build_client_dashboard(
    storage: Storage, client: User, now: datetime | None = None,
) -> dict:
    projects = await storage.projects.list_all(client_id=client.id)
    applications_by_project = {
        p.id: await storage.applications.list_all(project_id=p.id) for p in projects
    }
    hackers = {}
    for applications in applications_by_project.values():
        for a in applications:
            if a.hacker_id not in hackers:
                hacker = await storage.users.get(a.hacker_id)
                if hacker is not None:
                    hackers[a.hacker_id] = hacker
    return compute_client_dashboard(
        client, projects, applications_by_project, hackers,
        now or datetime.now(timezone.utc),
    )
