"""Domain entities for registered identities and their bearer tokens."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """A registered account. ``password_hash`` is a salted bcrypt digest."""

    username: str
    password_hash: str
    email: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_login: datetime | None = None


@dataclass
class SessionToken:
    """Server-side record of an issued bearer token.

    Only the SHA-256 hash of the token is kept; the plaintext leaves the
    server exactly once, in the login response.
    """

    user_id: int
    token_hash: str
    expires_at: datetime
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    revoked_at: datetime | None = None

    def is_active(self, now: datetime) -> bool:
        return self.revoked_at is None and self.expires_at > now
