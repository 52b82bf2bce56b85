"""User Schemas — signup, login, admin user management and profile updates.

Invariants:
    - username: 3-50 chars, stripped; email validated by EmailStr
    - Signup only creates client or hacker accounts and requires terms_agreed=True
    - Signup passwords: >= 8 chars with an uppercase letter and a digit
    - UserResponse omits password_hash

Design Decisions:
    - Update schemas are all-optional; routes dump with exclude_unset so omitted
      fields are never overwritten (shallow-merge contract of the repository)
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from hackerhire.core.domain_types import UserType


class _ProfileFields(BaseModel):
    """Optional display-profile fields shared by create and update schemas."""
    company: str | None = Field(None, max_length=200)
    title: str | None = Field(None, max_length=200)
    bio: str | None = Field(None, max_length=5000)
    location: str | None = Field(None, max_length=200)
    profile_image: str | None = Field(None, max_length=2000)


class UserCreate(_ProfileFields):
    """Admin-side user creation — any role."""
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    full_name: str = Field(min_length=2, max_length=200)
    user_type: UserType
    is_verified: bool = False

    @field_validator("username", "full_name")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class AdminCreate(UserCreate):
    """Admin creation — user_type is forced to admin by the route."""
    user_type: UserType = UserType.ADMIN


class SignupRequest(UserCreate):
    """Public self-signup."""
    user_type: Literal["client", "hacker"]
    terms_agreed: bool

    @field_validator("terms_agreed")
    @classmethod
    def must_agree(cls, v: bool) -> bool:
        if v is not True:
            raise ValueError("You must agree to the terms and conditions")
        return v

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        if not any(c.isupper() for c in v):
            raise ValueError("Password must contain at least one uppercase letter")
        if not any(c.isdigit() for c in v):
            raise ValueError("Password must contain at least one number")
        return v


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=128)


class UserUpdate(_ProfileFields):
    """Admin-side partial update of any user field."""
    username: str | None = Field(None, min_length=3, max_length=50)
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=8, max_length=128)
    full_name: str | None = Field(None, min_length=2, max_length=200)
    user_type: UserType | None = None
    is_verified: bool | None = None


class ProfileUpdate(_ProfileFields):
    """Self-service profile update for the session user."""
    full_name: str | None = Field(None, min_length=2, max_length=200)
    email: EmailStr | None = None


class PasswordChange(BaseModel):
    current_password: str = Field(min_length=1, max_length=128)
    new_password: str = Field(min_length=8, max_length=128)


class UserResponse(BaseModel):
    """Public user shape — everything except the password hash."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    user_type: str
    full_name: str
    company: str | None = None
    title: str | None = None
    bio: str | None = None
    location: str | None = None
    profile_image: str | None = None
    is_verified: bool = False
    created_at: datetime | None = None
