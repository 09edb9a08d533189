"""Application service for registration, login and bearer-token resolution.

Tokens are 32 random bytes (hex encoded) handed to the client once at
login. Only their SHA-256 hash is stored, so a leaked table does not
yield usable tokens. Tokens expire after a fixed lifetime and are
revoked at logout.
"""

import hashlib
import logging
import re
import secrets
from datetime import datetime, timedelta, timezone

from cattery.application.interfaces import (
    PasswordHasher,
    SessionTokenRepository,
    UserRepository,
)
from cattery.domain.entities import SessionToken, User
from cattery.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50
MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72  # bcrypt ignores or rejects anything longer
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

INVALID_CREDENTIALS = "Invalid username or password."


def generate_token() -> str:
    """64-character hex token from a cryptographically secure source."""
    return secrets.token_hex(32)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class AuthService:
    """Owns identity creation and the token lifecycle."""

    def __init__(
        self,
        users: UserRepository,
        tokens: SessionTokenRepository,
        hasher: PasswordHasher,
        *,
        token_ttl: timedelta = timedelta(hours=24),
    ):
        self._users = users
        self._tokens = tokens
        self._hasher = hasher
        self._token_ttl = token_ttl

    async def register(self, username: str, password: str, email: str | None = None) -> User:
        username = (username or "").strip()
        email = (email or "").strip() or None

        if not username or not password:
            raise ValidationFailedError("Username and password are required.")
        if not MIN_USERNAME_LENGTH <= len(username) <= MAX_USERNAME_LENGTH:
            raise ValidationFailedError(
                f"Username must be between {MIN_USERNAME_LENGTH} and "
                f"{MAX_USERNAME_LENGTH} characters."
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationFailedError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationFailedError("Password is too long.")
        if email is not None and not EMAIL_PATTERN.match(email):
            raise ValidationFailedError("Please enter a valid email address.")

        if await self._users.get_by_username(username) is not None:
            raise DuplicateEntityError("User", "username", username)

        user = await self._users.create(
            User(
                username=username,
                password_hash=self._hasher.hash(password),
                email=email,
            )
        )
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user

    async def login(self, username: str, password: str) -> tuple[User, str, datetime]:
        """Verify credentials and issue a token.

        Returns (user, plaintext_token, expires_at). Unknown user and wrong
        password fail with the same message.
        """
        user = await self._users.get_by_username((username or "").strip())
        if user is None or not password or not self._hasher.verify(password, user.password_hash):
            logger.info("Failed login for username %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        now = _utcnow()
        await self._users.touch_last_login(user.id, now)
        user.last_login = now

        token = generate_token()
        expires_at = now + self._token_ttl
        await self._tokens.create(
            SessionToken(user_id=user.id, token_hash=hash_token(token), expires_at=expires_at)
        )
        logger.info("User %s logged in", user.id)
        return user, token, expires_at

    async def logout(self, token: str | None) -> None:
        """Revoke the presented token. Unknown or already revoked tokens are ignored."""
        if not token:
            return
        await self._tokens.revoke(hash_token(token), _utcnow())

    async def resolve_token(self, token: str | None) -> User | None:
        """Return the identity behind an active token, or None."""
        if not token:
            return None
        record = await self._tokens.get_by_hash(hash_token(token))
        if record is None:
            return None
        record.expires_at = _as_aware(record.expires_at)
        if not record.is_active(_utcnow()):
            return None
        return await self._users.get_by_id(record.user_id)
