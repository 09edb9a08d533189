"""Application service for adopting and un-adopting cats."""

import logging

from cattery.application.interfaces import AdoptionRepository, CatRepository
from cattery.domain.entities import AdoptedCat, Adoption, AdoptionStatus, User
from cattery.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class AdoptionService:
    """Join-table operations scoped to the acting identity."""

    def __init__(self, adoptions: AdoptionRepository, cats: CatRepository):
        self._adoptions = adoptions
        self._cats = cats

    async def adopt(self, actor: User | None, cat_id: int) -> Adoption:
        """Link the actor to a cat. A second adopt of the same cat is a conflict."""
        if actor is None:
            raise AuthenticationError()
        if await self._cats.get_by_id(cat_id) is None:
            raise EntityNotFoundError("Cat", cat_id)
        if await self._adoptions.exists(actor.id, cat_id):
            raise DuplicateEntityError("Adoption", "cat_id", str(cat_id))

        adoption = await self._adoptions.create(Adoption(user_id=actor.id, cat_id=cat_id))
        logger.info("User %s adopted cat %s", actor.id, cat_id)
        return adoption

    async def unadopt(self, actor: User | None, cat_id: int) -> None:
        if actor is None:
            raise AuthenticationError()
        if not await self._adoptions.delete(actor.id, cat_id):
            raise EntityNotFoundError("Adoption", cat_id)

    async def list_adoptions(self, actor: User | None) -> list[AdoptedCat]:
        if actor is None:
            raise AuthenticationError()
        return await self._adoptions.list_for_user(actor.id)

    async def status(self, actor: User | None, cat_id: int) -> AdoptionStatus:
        """Adoption count for a cat; ``user_adopted`` is always False for anonymous callers."""
        if await self._cats.get_by_id(cat_id) is None:
            raise EntityNotFoundError("Cat", cat_id)
        count = await self._adoptions.count_for_cat(cat_id)
        user_adopted = actor is not None and await self._adoptions.exists(actor.id, cat_id)
        return AdoptionStatus(cat_id=cat_id, count=count, user_adopted=user_adopted)
