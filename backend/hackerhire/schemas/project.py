"""Project Schemas — project posting, updates and bulk deletion.

Invariants:
    - Required text fields are non-empty after stripping
    - skills: up to 50 non-empty tags, written through to ProjectSkill rows
    - New projects are always created open
    - BulkDeleteRequest.ids is non-empty
"""

from pydantic import BaseModel, Field, field_validator

from hackerhire.core.domain_types import ProjectStatus


class ProjectCreate(BaseModel):
    """Project posting. client_id defaults to the session user."""
    client_id: int | None = Field(None, ge=1)
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=20_000)
    requirements: str = Field(min_length=1, max_length=20_000)
    budget: str = Field(min_length=1, max_length=100)
    timeframe: str = Field(min_length=1, max_length=100)
    additional_details: str | None = Field(None, max_length=20_000)
    status: ProjectStatus = ProjectStatus.OPEN
    skills: list[str] = Field(default_factory=list, max_length=50)

    @field_validator("title", "description", "requirements", "budget", "timeframe")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v

    @field_validator("status")
    @classmethod
    def starts_open(cls, v: ProjectStatus) -> ProjectStatus:
        if v != ProjectStatus.OPEN:
            raise ValueError("new projects start open; later states go through updates")
        return v

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: list[str]) -> list[str]:
        cleaned = [s.strip() for s in v]
        if any(not s for s in cleaned):
            raise ValueError("skills cannot contain empty values")
        return cleaned


class ProjectUpdate(BaseModel):
    """Partial project update; status changes go through the transition table."""
    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = Field(None, min_length=1, max_length=20_000)
    requirements: str | None = Field(None, min_length=1, max_length=20_000)
    budget: str | None = Field(None, min_length=1, max_length=100)
    timeframe: str | None = Field(None, min_length=1, max_length=100)
    additional_details: str | None = Field(None, max_length=20_000)
    status: ProjectStatus | None = None


class BulkDeleteRequest(BaseModel):
    ids: list[int] = Field(min_length=1, max_length=1000)
