"""Status Transition Enforcement — transition tables for projects and applications.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Project: open → in-progress → completed; canceled from open or in-progress
    - completed and canceled are terminal
    - Application: pending → accepted | rejected, then terminal
    - Re-setting the current status is a no-op, never an error

Design Decisions:
    - Enforced table over permissive any-to-any updates: reopening a completed
      engagement would silently orphan its reviews (ADR: transition table)
    - Raise InvalidStatusTransitionError (not return dicts): route layer relies on the
      global HackerHireError handler for the 400 response
"""

from hackerhire.core.domain_types import ApplicationStatus, ProjectStatus
from hackerhire.core.errors import InvalidStatusTransitionError

PROJECT_TRANSITIONS: dict[ProjectStatus, frozenset[ProjectStatus]] = {
    ProjectStatus.OPEN: frozenset({ProjectStatus.IN_PROGRESS, ProjectStatus.CANCELED}),
    ProjectStatus.IN_PROGRESS: frozenset({ProjectStatus.COMPLETED, ProjectStatus.CANCELED}),
    ProjectStatus.COMPLETED: frozenset(),
    ProjectStatus.CANCELED: frozenset(),
}

APPLICATION_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({
        ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.ACCEPTED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}


def can_transition_project(current: str, requested: str) -> bool:
    current_status, requested_status = ProjectStatus(current), ProjectStatus(requested)
    if current_status == requested_status:
        return True
    return requested_status in PROJECT_TRANSITIONS[current_status]


def can_transition_application(current: str, requested: str) -> bool:
    current_status = ApplicationStatus(current)
    requested_status = ApplicationStatus(requested)
    if current_status == requested_status:
        return True
    return requested_status in APPLICATION_TRANSITIONS[current_status]


def check_project_transition(current: str, requested: str) -> None:
    """Raise InvalidStatusTransitionError if the table forbids the move."""
    if not can_transition_project(current, requested):
        raise InvalidStatusTransitionError(
            "Project", ProjectStatus(current).value, ProjectStatus(requested).value,
        )


def check_application_transition(current: str, requested: str) -> None:
    """Raise InvalidStatusTransitionError if the application was already decided."""
    if not can_transition_application(current, requested):
        raise InvalidStatusTransitionError(
            "Application", ApplicationStatus(current).value,
            ApplicationStatus(requested).value,
        )
