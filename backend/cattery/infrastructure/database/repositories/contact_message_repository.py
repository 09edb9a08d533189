"""Concrete repository implementation for contact messages backed by SQLAlchemy."""

from sqlalchemy.ext.asyncio import AsyncSession

from cattery.application.interfaces import ContactMessageRepository
from cattery.domain.entities import ContactMessage
from cattery.infrastructure.database.models import ContactMessageModel


class SQLAlchemyContactMessageRepository(ContactMessageRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, message: ContactMessage) -> ContactMessage:
        model = ContactMessageModel(
            name=message.name,
            email=message.email,
            subject=message.subject,
            message=message.message,
            created_at=message.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        message.id = model.id
        return message
