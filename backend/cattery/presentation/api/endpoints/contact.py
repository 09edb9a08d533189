"""Contact form endpoint."""

from fastapi import APIRouter, Depends, status

from cattery.application.schemas import ContactRequest, MessageResponse
from cattery.application.services import ContactService
from cattery.infrastructure.dependencies import get_contact_service

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    data: ContactRequest,
    service: ContactService = Depends(get_contact_service),
) -> MessageResponse:
    """Store a message from the contact page."""
    await service.submit(data)
    return MessageResponse(message="Thank you for your message! We'll get back to you soon.")
