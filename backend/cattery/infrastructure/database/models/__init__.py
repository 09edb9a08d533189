from .cat import CatModel
from .user import UserModel, SessionTokenModel
from .adoption import AdoptionModel
from .contact_message import ContactMessageModel

__all__ = [
    "CatModel",
    "UserModel",
    "SessionTokenModel",
    "AdoptionModel",
    "ContactMessageModel",
]
