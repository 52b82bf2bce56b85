"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ProjectId, ReviewId, ApplicationId wrap ints — ids are store-assigned, never client-chosen
    - All valid states encoded as Enums — no raw string matching in services
    - Enum values are the exact wire strings ("in-progress", not "in_progress")

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders, compare equal to raw strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ProjectId = NewType("ProjectId", int)
ReviewId = NewType("ReviewId", int)
ApplicationId = NewType("ApplicationId", int)


# ─── Enums ───────────────────────────────────────────────────────

class UserType(str, Enum):
    """Account roles. Admins only come from seeding or admin creation."""
    CLIENT = "client"
    HACKER = "hacker"
    ADMIN = "admin"


class ProjectStatus(str, Enum):
    """Project lifecycle states — maps to the `status` column."""
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELED = "canceled"


class ApplicationStatus(str, Enum):
    """A hacker's bid on a project. Decided once, then terminal."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class InquiryType(str, Enum):
    """Contact form categories."""
    GENERAL = "general"
    PROJECT = "project"
    HACKER = "hacker"
    SUPPORT = "support"
    PARTNERSHIP = "partnership"
