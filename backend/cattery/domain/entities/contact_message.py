"""Domain entity for messages left through the contact form."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class ContactMessage:
    name: str
    email: str
    message: str
    subject: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
