"""Concrete repository implementation for Cat backed by SQLAlchemy."""

import logging

from sqlalchemy import ColumnElement, String, delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cattery.application.interfaces import CatRepository
from cattery.domain.entities import Cat, CatGender, CatPage, CatQuery
from cattery.infrastructure.database.models import CatModel

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


def _escape_like(text: str) -> str:
    """Make user text match literally inside a LIKE pattern."""
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def _owned_by_or_unowned(actor_id: int) -> ColumnElement[bool]:
    return or_(CatModel.owner_id.is_(None), CatModel.owner_id == actor_id)


class SQLAlchemyCatRepository(CatRepository):
    """Implements the CatRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def to_entity(model: CatModel) -> Cat:
        """Map ORM model → domain entity."""
        return Cat(
            id=model.id,
            name=model.name,
            tag=model.tag,
            description=model.description,
            img=model.img or "",
            age=model.age,
            origin=model.origin,
            gender=CatGender(model.gender) if model.gender else None,
            owner_id=model.owner_id,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Cat) -> CatModel:
        """Map domain entity → ORM model (for creation)."""
        return CatModel(
            name=entity.name,
            tag=entity.tag,
            description=entity.description,
            img=entity.img,
            age=entity.age,
            origin=entity.origin,
            gender=entity.gender.value if entity.gender else None,
            owner_id=entity.owner_id,
            created_at=entity.created_at,
        )

    def _contains_ignoring_case(self, column, text: str) -> ColumnElement[bool]:
        pattern = f"%{_escape_like(text)}%"
        if self._session.get_bind().dialect.name == "sqlite":
            # casefold() is registered on every SQLite connection by the Database handle
            return func.casefold(column, type_=String).like(pattern.casefold(), escape=_LIKE_ESCAPE)
        return column.ilike(pattern, escape=_LIKE_ESCAPE)

    def _filters(self, query: CatQuery) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        if query.search_text:
            conditions.append(
                or_(
                    self._contains_ignoring_case(CatModel.name, query.search_text),
                    self._contains_ignoring_case(CatModel.tag, query.search_text),
                    self._contains_ignoring_case(CatModel.description, query.search_text),
                )
            )
        if query.tag_filter:
            conditions.append(CatModel.tag == query.tag_filter)
        return conditions

    async def get_by_id(self, cat_id: int) -> Cat | None:
        result = await self._session.execute(
            select(CatModel)
            .where(CatModel.id == cat_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return self.to_entity(model) if model else None

    async def search(self, query: CatQuery) -> CatPage:
        conditions = self._filters(query)

        count_stmt = select(func.count()).select_from(CatModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(CatModel)
            .where(*conditions)
            .order_by(CatModel.created_at.desc(), CatModel.id.desc())
            .offset(query.offset)
            .limit(query.page_size)
        )
        result = await self._session.execute(stmt)
        return CatPage(
            items=[self.to_entity(m) for m in result.scalars().all()],
            total_count=total,
            page=query.page,
            page_size=query.page_size,
        )

    async def list_tags(self) -> list[str]:
        stmt = (
            select(CatModel.tag)
            .where(CatModel.tag.is_not(None), CatModel.tag != "")
            .distinct()
            .order_by(CatModel.tag)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, cat: Cat) -> Cat:
        model = self._to_model(cat)
        self._session.add(model)
        await self._session.flush()
        return self.to_entity(model)

    async def update_guarded(self, cat: Cat, actor_id: int, *, keep_image: bool) -> bool:
        values = {
            "name": cat.name,
            "tag": cat.tag,
            "description": cat.description,
            "age": cat.age,
            "origin": cat.origin,
            "gender": cat.gender.value if cat.gender else None,
            # Unowned rows are claimed by whoever updates them first
            "owner_id": func.coalesce(CatModel.owner_id, actor_id),
        }
        if not keep_image:
            values["img"] = cat.img

        stmt = (
            update(CatModel)
            .where(CatModel.id == cat.id, _owned_by_or_unowned(actor_id))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def delete_guarded(self, cat_id: int, actor_id: int) -> bool:
        stmt = (
            delete(CatModel)
            .where(CatModel.id == cat_id, _owned_by_or_unowned(actor_id))
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount:
            logger.debug("Deleted cat %s", cat_id)
        return result.rowcount > 0
