from .cat_repository import CatRepository
from .user_repository import UserRepository, SessionTokenRepository
from .adoption_repository import AdoptionRepository
from .contact_message_repository import ContactMessageRepository
from .image_resolver import ImageResolver
from .password_hasher import PasswordHasher

__all__ = [
    "CatRepository",
    "UserRepository",
    "SessionTokenRepository",
    "AdoptionRepository",
    "ContactMessageRepository",
    "ImageResolver",
    "PasswordHasher",
]
