"""Contact Routes — public contact form and the admin inbox."""

import logging

from fastapi import APIRouter, Depends, status

from hackerhire.api.dependencies import get_storage, require_admin
from hackerhire.core.entities import User
from hackerhire.core.errors import ResourceNotFoundError
from hackerhire.core.repository_protocols import Storage
from hackerhire.schemas.contact import ContactMessageCreate, ContactMessageResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contact", status_code=status.HTTP_201_CREATED)
async def submit_contact_message(
    body: ContactMessageCreate, storage: Storage = Depends(get_storage),
):
    message = await storage.contact_messages.create(body.model_dump())
    logger.info(f"Contact message {message.id} received ({message.inquiry_type})")
    return {"success": True, "message": "Your message has been sent"}


@router.get("/contact-messages", response_model=list[ContactMessageResponse])
async def list_contact_messages(
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return await storage.contact_messages.list_all()


@router.patch(
    "/contact-messages/{message_id}/read", response_model=ContactMessageResponse,
)
async def mark_contact_message_read(
    message_id: int,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    message = await storage.contact_messages.update(message_id, {"is_read": True})
    if message is None:
        raise ResourceNotFoundError("ContactMessage", message_id)
    return message
