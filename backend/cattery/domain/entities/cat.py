"""Domain entity: a single cat catalogue record."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class CatGender(str, Enum):
    """Accepted values for a cat's gender attribute."""

    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


@dataclass
class Cat:
    """Core domain entity for a catalogued cat.

    ``owner_id`` is ``None`` for legacy rows created before ownership
    existed. Such rows are open to any authenticated identity, and the
    first update claims them.
    """

    name: str
    tag: str
    img: str = ""
    description: str | None = None
    age: int | None = None
    origin: str | None = None
    gender: CatGender | None = None
    owner_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
