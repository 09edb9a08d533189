"""Domain entities for adoption links between identities and cats."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .cat import Cat


@dataclass
class Adoption:
    """Join entity: one identity's claim on one cat. Unique per pair."""

    user_id: int
    cat_id: int
    id: int | None = None
    adopted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class AdoptedCat:
    """A cat as seen from the adopter's list, with the adoption timestamp."""

    cat: Cat
    adopted_at: datetime


@dataclass
class AdoptionStatus:
    """Adoption count for a cat plus whether the caller is one of the adopters."""

    cat_id: int
    count: int
    user_adopted: bool = False
