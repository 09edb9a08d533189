from .cat_repository import SQLAlchemyCatRepository
from .user_repository import SQLAlchemyUserRepository, SQLAlchemySessionTokenRepository
from .adoption_repository import SQLAlchemyAdoptionRepository
from .contact_message_repository import SQLAlchemyContactMessageRepository

__all__ = [
    "SQLAlchemyCatRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemySessionTokenRepository",
    "SQLAlchemyAdoptionRepository",
    "SQLAlchemyContactMessageRepository",
]
