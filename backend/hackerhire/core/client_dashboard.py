"""Client Dashboard — pure computation of a client's engagement overview.

Invariants:
    - All inputs come from already-fetched entities; `now` is injected (no clock reads)
    - security_score = min(100, completed * 20 + active * 10), not a real metric
    - progress: completed 100, open 0, in-progress 5%/day clamped to [10, 90]
    - Notifications only from applications newer than 7 days and in-progress projects

Design Decisions:
    - `now` as a parameter: deterministic tests without freezing time
    - No canned notifications: every entry is derived from stored data
"""

from datetime import datetime, timedelta

from hackerhire.core.domain_types import ApplicationStatus, ProjectStatus
from hackerhire.core.entities import Application, Project, User
from hackerhire.core.marketplace_views import initials

ACTIVE_PROJECTS_LIMIT = 3
NOTIFICATION_WINDOW = timedelta(days=7)
DEFAULT_DUE_IN = timedelta(days=14)


def compute_security_score(completed: int, active: int) -> int:
    return min(100, round(completed * 20 + active * 10))


def compute_progress(project: Project, now: datetime) -> int:
    """Percent complete estimated from status and age. Pure."""
    if project.status == ProjectStatus.COMPLETED.value:
        return 100
    if project.status == ProjectStatus.OPEN.value:
        return 0
    if project.created_at is None:
        return 10
    days = (now - project.created_at).days
    return min(max(days * 5, 10), 90)


def relative_time(moment: datetime, now: datetime) -> str:
    seconds = max(int((now - moment).total_seconds()), 0)
    if seconds < 60:
        return "just now"
    for unit, size in (("day", 86_400), ("hour", 3_600), ("minute", 60)):
        if seconds >= size:
            count = seconds // size
            return f"{count} {unit}{'s' if count != 1 else ''} ago"
    return "just now"


def compute_client_dashboard(
    client: User,
    projects: list[Project],
    applications_by_project: dict[int, list[Application]],
    hackers: dict[int, User],
    now: datetime,
) -> dict:
    """Build the dashboard payload for one client. Pure, no IO."""
    active = sum(1 for p in projects if p.status == ProjectStatus.IN_PROGRESS.value)
    completed = sum(1 for p in projects if p.status == ProjectStatus.COMPLETED.value)
    pending_reports = sum(
        1 for p in projects
        if any(
            a.status == ApplicationStatus.PENDING.value
            for a in applications_by_project.get(p.id, [])
        )
    )

    return {
        "user": {
            "name": client.full_name,
            "company": client.company or "Company",
            "email": client.email,
            "avatar": initials(client.full_name),
        },
        "stats": {
            "active_projects": active,
            "completed_projects": completed,
            "pending_reports": pending_reports,
            "security_score": compute_security_score(completed, active),
        },
        "active_projects": _active_projects(
            projects, applications_by_project, hackers, now,
        ),
        "notifications": _notifications(projects, applications_by_project, now),
    }


def _active_projects(
    projects: list[Project],
    applications_by_project: dict[int, list[Application]],
    hackers: dict[int, User],
    now: datetime,
) -> list[dict]:
    live = [
        p for p in projects
        if p.status in (ProjectStatus.IN_PROGRESS.value, ProjectStatus.OPEN.value)
    ]
    return [
        _active_project(p, applications_by_project.get(p.id, []), hackers, now)
        for p in live[:ACTIVE_PROJECTS_LIMIT]
    ]


def _active_project(
    project: Project,
    applications: list[Application],
    hackers: dict[int, User],
    now: datetime,
) -> dict:
    assigned = _assigned_application(applications)
    hacker = hackers.get(assigned.hacker_id) if assigned else None
    in_progress = project.status == ProjectStatus.IN_PROGRESS.value
    return {
        "id": project.id,
        "title": project.title,
        "status": "In Progress" if in_progress else "Just Started",
        "progress": compute_progress(project, now),
        "hacker": (
            {"id": hacker.id, "name": hacker.full_name, "avatar": initials(hacker.full_name)}
            if hacker else {"id": 0, "name": "Not Assigned", "avatar": "NA"}
        ),
        "due_date": project.timeframe or (now + DEFAULT_DUE_IN).date().isoformat(),
        "budget": project.budget,
    }


def _assigned_application(applications: list[Application]) -> Application | None:
    """Accepted application if any, else the first one received."""
    for a in applications:
        if a.status == ApplicationStatus.ACCEPTED.value:
            return a
    return applications[0] if applications else None


def _notifications(
    projects: list[Project],
    applications_by_project: dict[int, list[Application]],
    now: datetime,
) -> list[dict]:
    notifications = []
    for project in projects:
        for a in applications_by_project.get(project.id, []):
            if now - a.created_at < NOTIFICATION_WINDOW:
                notifications.append({
                    "id": f"application-{a.id}",
                    "message": f"New application received for {project.title}",
                    "time": relative_time(a.created_at, now),
                    "read": False,
                })
    for project in projects:
        if project.status == ProjectStatus.IN_PROGRESS.value:
            notifications.append({
                "id": f"status-{project.id}",
                "message": f'Project "{project.title}" is in progress',
                "time": "Recently updated",
                "read": False,
            })
    return notifications
