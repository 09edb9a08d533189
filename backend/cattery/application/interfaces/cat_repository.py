"""Abstract repository interface (port) for Cat persistence."""

from abc import ABC, abstractmethod

from cattery.domain.entities import Cat, CatPage, CatQuery


class CatRepository(ABC):
    """Port for cat persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, cat_id: int) -> Cat | None:
        """Retrieve a single cat by its ID."""
        ...

    @abstractmethod
    async def search(self, query: CatQuery) -> CatPage:
        """Return one page of cats matching the query, newest first, with the total count."""
        ...

    @abstractmethod
    async def list_tags(self) -> list[str]:
        """Return the distinct non-empty tags in lexicographic order."""
        ...

    @abstractmethod
    async def create(self, cat: Cat) -> Cat:
        """Persist a new cat and return it with the generated ID."""
        ...

    @abstractmethod
    async def update_guarded(self, cat: Cat, actor_id: int, *, keep_image: bool) -> bool:
        """Replace a cat's fields if ``actor_id`` owns it or nobody does.

        The ownership condition is part of the write itself. An unowned
        record becomes owned by ``actor_id``. With ``keep_image`` the stored
        image is left untouched. Returns True when a row was written.
        """
        ...

    @abstractmethod
    async def delete_guarded(self, cat_id: int, actor_id: int) -> bool:
        """Delete a cat if ``actor_id`` owns it or nobody does. Returns True if deleted."""
        ...
