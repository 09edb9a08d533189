"""Abstract repository interface (port) for contact form messages."""

from abc import ABC, abstractmethod

from cattery.domain.entities import ContactMessage


class ContactMessageRepository(ABC):

    @abstractmethod
    async def create(self, message: ContactMessage) -> ContactMessage:
        """Persist a new message and return it with the generated ID."""
        ...
