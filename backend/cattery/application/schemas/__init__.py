from .cat import (
    CatWrite,
    CatResponse,
    CatListResponse,
    TagListResponse,
    CatCreatedResponse,
    CatUpdatedResponse,
    CatDeletedResponse,
)
from .auth import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    RegisterResponse,
    LoginResponse,
    AuthStatusResponse,
    MessageResponse,
)
from .adoption import (
    AdoptRequest,
    AdoptResponse,
    AdoptedCatResponse,
    AdoptionListResponse,
    AdoptionStatusResponse,
)
from .contact import ContactRequest

__all__ = [
    "CatWrite",
    "CatResponse",
    "CatListResponse",
    "TagListResponse",
    "CatCreatedResponse",
    "CatUpdatedResponse",
    "CatDeletedResponse",
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "RegisterResponse",
    "LoginResponse",
    "AuthStatusResponse",
    "MessageResponse",
    "AdoptRequest",
    "AdoptResponse",
    "AdoptedCatResponse",
    "AdoptionListResponse",
    "AdoptionStatusResponse",
    "ContactRequest",
]
