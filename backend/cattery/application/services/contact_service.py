"""Application service for the contact form."""

import logging

from cattery.application.interfaces import ContactMessageRepository
from cattery.application.schemas.contact import ContactRequest
from cattery.application.services.auth_service import EMAIL_PATTERN
from cattery.domain.entities import ContactMessage
from cattery.domain.exceptions import ValidationFailedError

logger = logging.getLogger(__name__)


class ContactService:

    def __init__(self, repository: ContactMessageRepository):
        self._repository = repository

    async def submit(self, data: ContactRequest) -> ContactMessage:
        name = (data.name or "").strip()
        email = (data.email or "").strip()
        message = (data.message or "").strip()

        if not name or not email or not message:
            raise ValidationFailedError("Please fill in all required fields.")
        if not EMAIL_PATTERN.match(email):
            raise ValidationFailedError("Please enter a valid email address.")

        stored = await self._repository.create(
            ContactMessage(
                name=name,
                email=email,
                subject=(data.subject or "").strip() or None,
                message=message,
            )
        )
        logger.info("Contact message %s received", stored.id)
        return stored
