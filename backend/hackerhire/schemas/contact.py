"""Contact Schemas — public contact form and admin inbox."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from hackerhire.core.domain_types import InquiryType


class ContactMessageCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=300)
    message: str = Field(min_length=1, max_length=10_000)
    inquiry_type: InquiryType


class ContactMessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    subject: str
    message: str
    inquiry_type: str
    is_read: bool
    created_at: datetime | None = None
