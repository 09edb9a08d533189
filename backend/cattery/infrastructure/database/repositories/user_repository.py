"""SQLAlchemy repositories for users and their session tokens."""

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cattery.application.interfaces import SessionTokenRepository, UserRepository
from cattery.domain.entities import SessionToken, User
from cattery.domain.exceptions import DuplicateEntityError
from cattery.infrastructure.database.models import SessionTokenModel, UserModel


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            email=model.email,
            created_at=model.created_at,
            last_login=model.last_login,
        )

    async def get_by_id(self, user_id: int) -> User | None:
        model = await self._session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    async def get_by_username(self, username: str) -> User | None:
        result = await self._session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            password_hash=user.password_hash,
            email=user.email,
            created_at=user.created_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError("User", "username", user.username) from exc
        return self._to_entity(model)

    async def touch_last_login(self, user_id: int, when: datetime) -> None:
        await self._session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(last_login=when)
            .execution_options(synchronize_session=False)
        )


class SQLAlchemySessionTokenRepository(SessionTokenRepository):
    """Implements the SessionTokenRepository port. Rows hold token hashes only."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: SessionTokenModel) -> SessionToken:
        return SessionToken(
            id=model.id,
            user_id=model.user_id,
            token_hash=model.token_hash,
            created_at=model.created_at,
            expires_at=model.expires_at,
            revoked_at=model.revoked_at,
        )

    async def create(self, token: SessionToken) -> SessionToken:
        model = SessionTokenModel(
            user_id=token.user_id,
            token_hash=token.token_hash,
            created_at=token.created_at,
            expires_at=token.expires_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def get_by_hash(self, token_hash: str) -> SessionToken | None:
        result = await self._session.execute(
            select(SessionTokenModel).where(SessionTokenModel.token_hash == token_hash)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def revoke(self, token_hash: str, when: datetime) -> bool:
        result = await self._session.execute(
            update(SessionTokenModel)
            .where(
                SessionTokenModel.token_hash == token_hash,
                SessionTokenModel.revoked_at.is_(None),
            )
            .values(revoked_at=when)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0
