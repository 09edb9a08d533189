from .base import Base
from .session import Database, get_db_session
from .models import CatModel, UserModel, SessionTokenModel, AdoptionModel, ContactMessageModel

__all__ = [
    "Base",
    "Database",
    "get_db_session",
    "CatModel",
    "UserModel",
    "SessionTokenModel",
    "AdoptionModel",
    "ContactMessageModel",
]
