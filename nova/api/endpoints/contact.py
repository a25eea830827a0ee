"""Contact form endpoints: submission and listing."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from nova.constants.constants import CONTACT_THANK_YOU
from nova.core.database import aget_db
from nova.schemas.contactSchema import (
    ContactRecord,
    ContactSubmissionRequest,
    ContactSubmissionResponse,
)
from nova.schemas.responseSchema import APIResponse
from nova.services.ContactService import ContactService


router = APIRouter(tags=["contact"])


@router.post(
    "/contact",
    response_model=APIResponse[ContactSubmissionResponse],
    response_model_exclude_none=True,
)
async def submit_contact(
    request: ContactSubmissionRequest,
    db: AsyncSession = Depends(aget_db)
):
    """Submit a contact form message."""
    contact_id = await ContactService(db).submit(
        name=request.name,
        email=request.email,
        subject=request.subject,
        message=request.message,
    )
    return APIResponse(
        success=True,
        message=CONTACT_THANK_YOU,
        data=ContactSubmissionResponse(id=contact_id),
    )


@router.get(
    "/contacts",
    response_model=APIResponse[List[ContactRecord]],
    response_model_exclude_none=True,
)
async def list_contacts(
    request: Request,
    db: AsyncSession = Depends(aget_db)
):
    """
    List every contact submission, newest first.
    Not authenticated; can be switched off with EXPOSE_CONTACT_LISTING.
    """
    if not request.app.state.settings.EXPOSE_CONTACT_LISTING:
        raise HTTPException(status_code=404, detail="Not Found")

    contacts = await ContactService(db).list()
    return APIResponse(success=True, data=contacts)
