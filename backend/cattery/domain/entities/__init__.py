from .cat import Cat, CatGender
from .user import User, SessionToken
from .adoption import Adoption, AdoptedCat, AdoptionStatus
from .contact_message import ContactMessage
from .query import CatQuery, CatPage

__all__ = [
    "Cat",
    "CatGender",
    "User",
    "SessionToken",
    "Adoption",
    "AdoptedCat",
    "AdoptionStatus",
    "ContactMessage",
    "CatQuery",
    "CatPage",
]
