from .cat_service import CatService
from .auth_service import AuthService
from .adoption_service import AdoptionService
from .contact_service import ContactService

__all__ = [
    "CatService",
    "AuthService",
    "AdoptionService",
    "ContactService",
]
