"""Abstract repository interfaces (ports) for identities and bearer tokens."""

from abc import ABC, abstractmethod
from datetime import datetime

from cattery.domain.entities import SessionToken, User


class UserRepository(ABC):
    """Port for user persistence."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user. Raises DuplicateEntityError for a taken username."""
        ...

    @abstractmethod
    async def touch_last_login(self, user_id: int, when: datetime) -> None:
        ...


class SessionTokenRepository(ABC):
    """Port for issued-token persistence."""

    @abstractmethod
    async def create(self, token: SessionToken) -> SessionToken:
        ...

    @abstractmethod
    async def get_by_hash(self, token_hash: str) -> SessionToken | None:
        ...

    @abstractmethod
    async def revoke(self, token_hash: str, when: datetime) -> bool:
        """Mark a token revoked. Returns False if no active token had that hash."""
        ...
