"""Concrete repository implementation for adoption links backed by SQLAlchemy."""

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cattery.application.interfaces import AdoptionRepository
from cattery.domain.entities import AdoptedCat, Adoption
from cattery.domain.exceptions import DuplicateEntityError
from cattery.infrastructure.database.models import AdoptionModel, CatModel
from cattery.infrastructure.database.repositories.cat_repository import SQLAlchemyCatRepository


class SQLAlchemyAdoptionRepository(AdoptionRepository):
    """Implements the AdoptionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def exists(self, user_id: int, cat_id: int) -> bool:
        result = await self._session.execute(
            select(AdoptionModel.id).where(
                AdoptionModel.user_id == user_id,
                AdoptionModel.cat_id == cat_id,
            )
        )
        return result.first() is not None

    async def create(self, adoption: Adoption) -> Adoption:
        model = AdoptionModel(
            user_id=adoption.user_id,
            cat_id=adoption.cat_id,
            adopted_at=adoption.adopted_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Lost a race with a concurrent adopt of the same pair
            raise DuplicateEntityError("Adoption", "cat_id", str(adoption.cat_id)) from exc
        return Adoption(
            id=model.id,
            user_id=model.user_id,
            cat_id=model.cat_id,
            adopted_at=model.adopted_at,
        )

    async def delete(self, user_id: int, cat_id: int) -> bool:
        result = await self._session.execute(
            delete(AdoptionModel).where(
                AdoptionModel.user_id == user_id,
                AdoptionModel.cat_id == cat_id,
            )
        )
        return result.rowcount > 0

    async def list_for_user(self, user_id: int) -> list[AdoptedCat]:
        stmt = (
            select(CatModel, AdoptionModel.adopted_at)
            .join(AdoptionModel, AdoptionModel.cat_id == CatModel.id)
            .where(AdoptionModel.user_id == user_id)
            .order_by(AdoptionModel.adopted_at.desc(), AdoptionModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [
            AdoptedCat(
                cat=SQLAlchemyCatRepository.to_entity(cat),
                adopted_at=adopted_at,
            )
            for cat, adopted_at in result.all()
        ]

    async def count_for_cat(self, cat_id: int) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(AdoptionModel).where(AdoptionModel.cat_id == cat_id)
        )
        return result.scalar_one()
