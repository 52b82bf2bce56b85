"""Engagement Schemas — applications, reviews and testimonials.

Invariants:
    - Applications are always created pending (status not accepted on input)
    - ApplicationDecision only moves to accepted or rejected
    - Review rating bounded 1.0-5.0
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ApplicationCreate(BaseModel):
    project_id: int = Field(ge=1)
    hacker_id: int = Field(ge=1)
    proposal: str = Field(min_length=1, max_length=20_000)
    estimated_time: str = Field(min_length=1, max_length=100)
    price_quote: str = Field(min_length=1, max_length=100)


class ApplicationDecision(BaseModel):
    status: Literal["accepted", "rejected"]


class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: int
    hacker_id: int
    proposal: str
    estimated_time: str
    price_quote: str
    status: str
    created_at: datetime | None = None


class ReviewCreate(BaseModel):
    project_id: int = Field(ge=1)
    client_id: int = Field(ge=1)
    hacker_id: int = Field(ge=1)
    rating: float = Field(ge=1.0, le=5.0)
    comment: str | None = Field(None, max_length=5000)


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: int
    client_id: int
    hacker_id: int
    rating: float
    comment: str | None = None
    created_at: datetime | None = None


class TestimonialCreate(BaseModel):
    review_id: int = Field(ge=1)
    is_featured: bool = False


class TestimonialUpdate(BaseModel):
    is_featured: bool


class TestimonialResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    review_id: int
    is_featured: bool
