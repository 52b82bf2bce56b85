"""Hacker Profile Schemas — skills and certifications attached to a hacker."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class HackerSkillCreate(BaseModel):
    skill: str = Field(min_length=1, max_length=200)
    years_experience: int | None = Field(None, ge=0, le=80)


class HackerSkillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    skill: str
    years_experience: int | None = None


class HackerCertificationCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    issuer: str | None = Field(None, max_length=200)
    date_obtained: date | None = None


class HackerCertificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    issuer: str | None = None
    date_obtained: date | None = None
