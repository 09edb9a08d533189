"""Abstract repository interface (port) for adoption links."""

from abc import ABC, abstractmethod

from cattery.domain.entities import AdoptedCat, Adoption


class AdoptionRepository(ABC):
    """Port for adoption persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def exists(self, user_id: int, cat_id: int) -> bool:
        ...

    @abstractmethod
    async def create(self, adoption: Adoption) -> Adoption:
        """Persist a link. Raises DuplicateEntityError when the pair already exists."""
        ...

    @abstractmethod
    async def delete(self, user_id: int, cat_id: int) -> bool:
        """Remove a link. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def list_for_user(self, user_id: int) -> list[AdoptedCat]:
        """Cats adopted by ``user_id``, most recent adoption first."""
        ...

    @abstractmethod
    async def count_for_cat(self, cat_id: int) -> int:
        ...
