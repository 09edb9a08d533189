"""Application service (use case) for the cat catalogue."""

import logging
from collections.abc import Awaitable, Callable

from cattery.application.interfaces import CatRepository, ImageResolver
from cattery.application.schemas.cat import CatWrite
from cattery.domain.entities import Cat, CatPage, CatQuery, User
from cattery.domain.entities.query import DEFAULT_PAGE_SIZE
from cattery.domain.exceptions import (
    AuthenticationError,
    ConcurrentModificationError,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationFailedError,
)
from cattery.domain.ownership import DenyReason, Operation, evaluate_ownership

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_IMAGE = "default_placeholder.jpg"
GUARDED_WRITE_ATTEMPTS = 2


def _require_actor(actor: User | None) -> User:
    if actor is None or actor.id is None:
        raise AuthenticationError()
    return actor


def _clean(value: str | None) -> str | None:
    """Strip optional text; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _required_fields(data: CatWrite) -> tuple[str, str]:
    name = _clean(data.name)
    tag = _clean(data.tag)
    if not name or not tag:
        raise ValidationFailedError("Name and Tag are required fields.")
    return name, tag


class CatService:
    """Orchestrates cat CRUD: query building, image fallback and the ownership guard.

    The acting identity is passed into every call; ``None`` means the
    request carried no valid token.
    """

    def __init__(
        self,
        repository: CatRepository,
        image_resolver: ImageResolver | None = None,
        *,
        placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int | None = 100,
    ):
        self._repository = repository
        self._image_resolver = image_resolver
        self._placeholder_image = placeholder_image
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    # ── Reads ────────────────────────────────────────────────────────

    def build_query(
        self,
        *,
        search: str | None = None,
        tag_filter: str | None = None,
        page: str | int | None = None,
        limit: str | int | None = None,
    ) -> CatQuery:
        return CatQuery.from_params(
            search=search,
            tag_filter=tag_filter,
            page=page,
            limit=limit,
            default_page_size=self._default_page_size,
            max_page_size=self._max_page_size,
        )

    async def list_cats(
        self,
        actor: User | None,
        *,
        search: str | None = None,
        tag_filter: str | None = None,
        page: str | int | None = None,
        limit: str | int | None = None,
    ) -> CatPage:
        _require_actor(actor)
        query = self.build_query(search=search, tag_filter=tag_filter, page=page, limit=limit)
        return await self._repository.search(query)

    async def get_cat(self, actor: User | None, cat_id: int) -> Cat:
        _require_actor(actor)
        cat = await self._repository.get_by_id(cat_id)
        if cat is None:
            raise EntityNotFoundError("Cat", cat_id)
        return cat

    async def list_tags(self) -> list[str]:
        return await self._repository.list_tags()

    # ── Writes ───────────────────────────────────────────────────────

    async def create_cat(self, actor: User | None, data: CatWrite) -> Cat:
        owner = _require_actor(actor)
        name, tag = _required_fields(data)

        img = _clean(data.img)
        if img is None:
            img = await self._resolve_image()

        cat = Cat(
            name=name,
            tag=tag,
            img=img,
            description=_clean(data.description),
            age=data.age,
            origin=_clean(data.origin),
            gender=data.gender,
            owner_id=owner.id,
        )
        created = await self._repository.create(cat)
        logger.info("Cat %s created by user %s", created.id, owner.id)
        return created

    async def update_cat(self, actor: User | None, cat_id: int, data: CatWrite) -> Cat:
        """Full replace of a cat's fields, guarded by ownership.

        Absent optional fields are cleared; the image is kept when not
        supplied. Updating an unowned record makes the actor its owner.
        """
        owner = _require_actor(actor)
        name, tag = _required_fields(data)
        img = _clean(data.img)

        replacement = Cat(
            id=cat_id,
            name=name,
            tag=tag,
            img=img or "",
            description=_clean(data.description),
            age=data.age,
            origin=_clean(data.origin),
            gender=data.gender,
        )
        await self._guarded_write(
            owner,
            cat_id,
            Operation.UPDATE,
            lambda: self._repository.update_guarded(
                replacement, owner.id, keep_image=img is None
            ),
        )

        updated = await self._repository.get_by_id(cat_id)
        if updated is None:
            raise EntityNotFoundError("Cat", cat_id)
        return updated

    async def delete_cat(self, actor: User | None, cat_id: int) -> None:
        owner = _require_actor(actor)
        await self._guarded_write(
            owner,
            cat_id,
            Operation.DELETE,
            lambda: self._repository.delete_guarded(cat_id, owner.id),
        )
        logger.info("Cat %s deleted by user %s", cat_id, owner.id)

    # ── Helpers ──────────────────────────────────────────────────────

    async def _resolve_image(self) -> str:
        if self._image_resolver is not None:
            url = await self._image_resolver.resolve_image_url()
            if url:
                return url
        logger.warning("No external image available; using placeholder %s", self._placeholder_image)
        return self._placeholder_image

    async def _guarded_write(
        self,
        actor: User,
        cat_id: int,
        operation: Operation,
        write: Callable[[], Awaitable[bool]],
    ) -> None:
        """Run a conditional write, explaining or retrying it when no row matched.

        A write that missed although the re-read says it is allowed lost a
        race with a concurrent owner change; it is retried once before
        giving up with a conflict.
        """
        for _ in range(GUARDED_WRITE_ATTEMPTS):
            if await write():
                return
            await self._raise_denied(actor, cat_id, operation)
        logger.warning("Cat %s kept changing during %s by user %s", cat_id, operation.value, actor.id)
        raise ConcurrentModificationError("Cat", cat_id)

    async def _raise_denied(self, actor: User, cat_id: int, operation: Operation) -> None:
        """Explain a guarded write that touched no rows.

        Returns normally when the record, as it is now, would allow the write.
        """
        current = await self._repository.get_by_id(cat_id)
        decision = evaluate_ownership(
            actor.id,
            exists=current is not None,
            owner_id=current.owner_id if current else None,
            operation=operation,
        )
        if decision.reason is DenyReason.NOT_FOUND:
            raise EntityNotFoundError("Cat", cat_id)
        if decision.allow:
            logger.info("Cat %s changed owner during %s; retrying", cat_id, operation.value)
            return
        logger.warning(
            "User %s denied %s on cat %s (owner=%s)",
            actor.id,
            operation.value,
            cat_id,
            current.owner_id if current else None,
        )
        raise PermissionDeniedError("Cat", cat_id)
