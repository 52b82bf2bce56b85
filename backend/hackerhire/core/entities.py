"""Entity Model — typed records owned by the storage layer.

Invariants:
    - Every entity has an int `id` assigned by storage, never by the caller
    - Relationships are plain int foreign-key fields (no referential integrity)
    - NULLABLE fields: empty string or None on insert both become None
    - SERVER_FORCED fields are set by storage regardless of caller input
    - Enum members are flattened to their wire strings before storage

Design Decisions:
    - Plain dataclasses, not ORM models: core stays IO-free and both storage
      backends (memory, SQL) return the same types (ADR: backend parity)
    - prepare_insert/clean_partial shared by both backends so defaults and
      coercion cannot drift between them
"""

from dataclasses import MISSING, dataclass, field, fields, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, ClassVar, TypeVar


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """A client, hacker or admin account."""
    NULLABLE: ClassVar[tuple[str, ...]] = (
        "company", "title", "bio", "location", "profile_image",
    )
    SERVER_FORCED: ClassVar[dict[str, Any]] = {}

    id: int
    username: str
    email: str
    password_hash: str
    user_type: str
    full_name: str
    company: str | None = None
    title: str | None = None
    bio: str | None = None
    location: str | None = None
    profile_image: str | None = None
    is_verified: bool = False
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class Project:
    """An engagement posted by a client."""
    NULLABLE: ClassVar[tuple[str, ...]] = ("additional_details",)
    SERVER_FORCED: ClassVar[dict[str, Any]] = {}

    id: int
    client_id: int
    title: str
    description: str
    requirements: str
    budget: str
    timeframe: str
    additional_details: str | None = None
    status: str = "open"
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class ProjectSkill:
    """Skill tag attached to a project. Duplicates allowed."""
    NULLABLE: ClassVar[tuple[str, ...]] = ()
    SERVER_FORCED: ClassVar[dict[str, Any]] = {}

    id: int
    project_id: int
    skill: str


@dataclass
class HackerSkill:
    NULLABLE: ClassVar[tuple[str, ...]] = ("years_experience",)
    SERVER_FORCED: ClassVar[dict[str, Any]] = {}

    id: int
    user_id: int
    skill: str
    years_experience: int | None = None


@dataclass
class HackerCertification:
    NULLABLE: ClassVar[tuple[str, ...]] = ("issuer", "date_obtained")
    SERVER_FORCED: ClassVar[dict[str, Any]] = {}

    id: int
    user_id: int
    name: str
    issuer: str | None = None
    date_obtained: date | None = None


@dataclass
class Review:
    """Client's rating of a hacker for one project."""
    NULLABLE: ClassVar[tuple[str, ...]] = ("comment",)
    SERVER_FORCED: ClassVar[dict[str, Any]] = {}

    id: int
    project_id: int
    client_id: int
    hacker_id: int
    rating: float
    comment: str | None = None
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class Testimonial:
    """Pointer to a Review curated for the homepage."""
    NULLABLE: ClassVar[tuple[str, ...]] = ()
    SERVER_FORCED: ClassVar[dict[str, Any]] = {}

    id: int
    review_id: int
    is_featured: bool = False


@dataclass
class Application:
    """A hacker's bid on a project. Always created pending."""
    NULLABLE: ClassVar[tuple[str, ...]] = ()
    SERVER_FORCED: ClassVar[dict[str, Any]] = {"status": "pending"}

    id: int
    project_id: int
    hacker_id: int
    proposal: str
    estimated_time: str
    price_quote: str
    status: str = "pending"
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class ContactMessage:
    """Inbound inquiry from the public contact form. Always created unread."""
    NULLABLE: ClassVar[tuple[str, ...]] = ()
    SERVER_FORCED: ClassVar[dict[str, Any]] = {"is_read": False}

    id: int
    name: str
    email: str
    subject: str
    message: str
    inquiry_type: str
    is_read: bool = False
    created_at: datetime = field(default_factory=_utcnow)


E = TypeVar("E")


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def prepare_insert(entity_type: type, data: dict[str, Any]) -> dict[str, Any]:
    """Build the full insert record (minus id) for entity_type. Pure.

    Unknown keys and `id` are dropped. Missing or None fields fall back to the
    dataclass default; NULLABLE fields given as "" become None.
    """
    record: dict[str, Any] = {}
    for f in fields(entity_type):
        if f.name == "id":
            continue
        value = _plain(data.get(f.name))
        if f.name in entity_type.NULLABLE and value == "":
            value = None
        if value is None and f.name not in entity_type.NULLABLE:
            if f.default is not MISSING:
                value = f.default
            elif f.default_factory is not MISSING:
                value = f.default_factory()
            else:
                continue  # required field absent, caller validated input
        record[f.name] = value
    record.update(entity_type.SERVER_FORCED)
    return record


def clean_partial(entity_type: type, partial: dict[str, Any]) -> dict[str, Any]:
    """Filter an update payload to known, mutable fields. Pure."""
    known = {f.name for f in fields(entity_type)} - {"id"}
    return {k: _plain(v) for k, v in partial.items() if k in known}


def merge(entity: E, partial: dict[str, Any]) -> E:
    """Shallow merge: fields absent from partial keep their prior values."""
    return replace(entity, **clean_partial(type(entity), partial))
