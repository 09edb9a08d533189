"""FastAPI dependency injection: wires infrastructure to application layer.

Long-lived collaborators (settings, database handle, image resolver,
password hasher) are created by the app factory and read back from
``app.state``; repositories and services are built per request around
that request's session.
"""

from collections.abc import AsyncGenerator
from datetime import timedelta

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from cattery.config import Settings
from cattery.application.interfaces import ImageResolver, PasswordHasher
from cattery.application.services import (
    AdoptionService,
    AuthService,
    CatService,
    ContactService,
)
from cattery.domain.entities import User
from cattery.domain.exceptions import AuthenticationError
from cattery.infrastructure.database.session import get_db_session
from cattery.infrastructure.database.repositories import (
    SQLAlchemyAdoptionRepository,
    SQLAlchemyCatRepository,
    SQLAlchemyContactMessageRepository,
    SQLAlchemySessionTokenRepository,
    SQLAlchemyUserRepository,
)

_bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_image_resolver(request: Request) -> ImageResolver | None:
    return request.app.state.image_resolver


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


async def get_cat_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
    image_resolver: ImageResolver | None = Depends(get_image_resolver),
) -> AsyncGenerator[CatService, None]:
    """Provides a CatService with its repository and image resolver wired up."""
    yield CatService(
        SQLAlchemyCatRepository(session),
        image_resolver,
        placeholder_image=settings.placeholder_image,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService bound to the request session."""
    yield AuthService(
        SQLAlchemyUserRepository(session),
        SQLAlchemySessionTokenRepository(session),
        hasher,
        token_ttl=timedelta(hours=settings.token_ttl_hours),
    )


async def get_adoption_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AdoptionService, None]:
    """Provides an AdoptionService instance with its repositories wired up."""
    yield AdoptionService(
        SQLAlchemyAdoptionRepository(session),
        SQLAlchemyCatRepository(session),
    )


async def get_contact_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ContactService, None]:
    yield ContactService(SQLAlchemyContactMessageRepository(session))


# ── Acting identity ──────────────────────────────────────────────────


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> str | None:
    """The raw token from ``Authorization: Bearer ...``, if any."""
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_user(
    token: str | None = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> User | None:
    """Resolve the acting identity; None for anonymous or stale tokens."""
    return await auth_service.resolve_token(token)


async def require_user(user: User | None = Depends(get_current_user)) -> User:
    """Like get_current_user, but an anonymous caller is a 401."""
    if user is None:
        raise AuthenticationError()
    return user
