"""Marketplace Views — pure assembly of cross-entity read models.

Invariants:
    - All inputs are already-fetched entities (no IO, no DB, no storage handle)
    - average_rating never divides by zero: no reviews → 0
    - Ratings rounded half-up to one decimal place (4.25 -> 4.3)
    - Recomputed on every request; nothing here is cached

Design Decisions:
    - Pure functions over methods on entities (ADR: entities are storage records,
      views are presentation)
    - Services fetch, views shape: the same split as services/dashboard.py vs.
      core/client_dashboard.py
"""

from dataclasses import asdict
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from hackerhire.core.domain_types import ApplicationStatus
from hackerhire.core.entities import (
    Application, HackerCertification, HackerSkill, Project,
    Review, Testimonial, User,
)

DEFAULT_HACKER_TITLE = "Security Specialist"
DEFAULT_HACKER_BIO = (
    "Experienced security specialist with expertise in penetration testing "
    "and vulnerability assessment."
)
DEFAULT_LOCATION = "Remote"
DEFAULT_HOURLY_RATE = "$80-120/hr"
DEFAULT_AVAILABILITY = "20 hrs/week"
RECENT_PROJECTS_LIMIT = 3


def average_rating(ratings: list[float]) -> float:
    """Arithmetic mean rounded half-up to one decimal; 0 when there are no ratings."""
    if not ratings:
        return 0.0
    mean = Decimal(sum(ratings) / len(ratings))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def initials(full_name: str) -> str:
    return "".join(part[0] for part in full_name.split())


def month_year(moment: datetime | None, fallback: str = "Unknown Date") -> str:
    """'March 2026' style label used across profile pages."""
    return moment.strftime("%B %Y") if moment else fallback


def user_summary(user: User) -> dict:
    """Session-safe user shape returned by auth endpoints."""
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "full_name": user.full_name,
        "user_type": user.user_type,
    }


# ─── Projects ────────────────────────────────────────────────────

def project_detail(project: Project, skills: list[str]) -> dict:
    return {**asdict(project), "skills": list(skills)}


def project_listing(
    project: Project, skills: list[str], client: User | None,
) -> dict:
    """Project row for the browse page: skills + client display name."""
    view = project_detail(project, skills)
    view["client_name"] = client.full_name if client else "Unknown Client"
    return view


# ─── Hackers ─────────────────────────────────────────────────────

def featured_hacker(
    hacker: User, skills: list[HackerSkill], reviews: list[Review],
) -> dict:
    """Card shown in the featured-hackers carousel."""
    return {
        "id": hacker.id,
        "name": hacker.full_name,
        "title": hacker.title or DEFAULT_HACKER_TITLE,
        "skills": [s.skill for s in skills],
        "rating": average_rating([r.rating for r in reviews]),
        "review_count": len(reviews),
        "available": True,
        "image_placeholder": initials(hacker.full_name),
    }


def hacker_profile(
    hacker: User,
    skills: list[HackerSkill],
    certifications: list[HackerCertification],
    reviews: list[Review],
    review_clients: dict[int, User],
    applications: list[Application],
    projects: dict[int, Project],
) -> dict:
    """Full public profile: skills, certifications, reviews, recent work.

    review_clients and projects are lookups by id; missing keys render as
    placeholders rather than failing the whole profile.
    """
    accepted = [
        a for a in applications if a.status == ApplicationStatus.ACCEPTED.value
    ]
    return {
        "id": hacker.id,
        "name": hacker.full_name,
        "title": hacker.title or DEFAULT_HACKER_TITLE,
        "location": hacker.location or DEFAULT_LOCATION,
        "hourly_rate": DEFAULT_HOURLY_RATE,
        "availability": DEFAULT_AVAILABILITY,
        "member_since": month_year(hacker.created_at, "Unknown"),
        "verified": hacker.is_verified,
        "rating": average_rating([r.rating for r in reviews]),
        "completed_projects": len(accepted),
        "description": hacker.bio or DEFAULT_HACKER_BIO,
        "skills": [s.skill for s in skills],
        "certifications": [c.name for c in certifications],
        "recent_projects": [
            _recent_project(a, projects.get(a.project_id))
            for a in accepted[:RECENT_PROJECTS_LIMIT]
        ],
        "reviews": [
            _review_with_client(r, review_clients.get(r.client_id))
            for r in reviews
        ],
    }


def _recent_project(application: Application, project: Project | None) -> dict:
    return {
        "id": application.project_id,
        "title": project.title if project else "Unknown Project",
        "description": application.proposal,
        "date": month_year(application.created_at),
    }


def _review_with_client(review: Review, client: User | None) -> dict:
    return {
        "id": review.id,
        "client_name": client.full_name if client else "Anonymous",
        "client_company": client.company if client else "Unknown",
        "rating": review.rating,
        "comment": review.comment or "",
        "date": month_year(review.created_at),
    }


# ─── Testimonials ────────────────────────────────────────────────

def testimonial_card(
    testimonial: Testimonial, review: Review | None, client: User | None,
) -> dict | None:
    """Resolve Testimonial → Review → client. None for dangling pointers."""
    if review is None or client is None:
        return None
    return {
        "id": testimonial.id,
        "content": review.comment or "",
        "name": client.full_name,
        "title": client.title or "",
        "avatar": initials(client.full_name),
        "is_featured": testimonial.is_featured,
    }
