"""Cat catalogue endpoints: gallery listing, tags and guarded CRUD.

Domain errors raised by CatService are turned into ``{"error": ...}``
responses by the handlers in ``cattery.presentation.api.error_handlers``.
"""

from fastapi import APIRouter, Depends, Query, status

from cattery.application.schemas import (
    CatCreatedResponse,
    CatDeletedResponse,
    CatListResponse,
    CatResponse,
    CatUpdatedResponse,
    CatWrite,
    TagListResponse,
)
from cattery.application.services import CatService
from cattery.domain.entities import Cat, User
from cattery.infrastructure.dependencies import get_cat_service, require_user

router = APIRouter(prefix="/cats", tags=["Cats"])
tags_router = APIRouter(tags=["Cats"])


def _cat_to_response(cat: Cat) -> CatResponse:
    return CatResponse.model_validate(cat, from_attributes=True)


@router.get("", response_model=CatListResponse)
async def list_cats(
    search: str | None = Query(None, description="Substring of name, tag or description"),
    tag_filter: str | None = Query(None, alias="tagFilter", description="Exact tag"),
    # Strings on purpose: non-numeric values fall back to defaults instead of a 400
    page: str | None = Query(None, description="1-based page number"),
    limit: str | None = Query(None, description="Page size"),
    user: User = Depends(require_user),
    service: CatService = Depends(get_cat_service),
) -> CatListResponse:
    """Retrieve a filtered page of cats, newest first."""
    result = await service.list_cats(
        user, search=search, tag_filter=tag_filter, page=page, limit=limit
    )
    return CatListResponse(
        cats=[_cat_to_response(c) for c in result.items],
        total_count=result.total_count,
        total_pages=result.total_pages,
        current_page=result.page,
        limit=result.page_size,
    )


@router.get("/{cat_id}", response_model=CatResponse)
async def get_cat(
    cat_id: int,
    user: User = Depends(require_user),
    service: CatService = Depends(get_cat_service),
) -> CatResponse:
    """Retrieve a single cat by ID."""
    return _cat_to_response(await service.get_cat(user, cat_id))


@router.post("", response_model=CatCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_cat(
    data: CatWrite,
    user: User = Depends(require_user),
    service: CatService = Depends(get_cat_service),
) -> CatCreatedResponse:
    """Create a cat owned by the caller; fetches a photo when ``img`` is empty."""
    cat = await service.create_cat(user, data)
    return CatCreatedResponse(
        message="Cat successfully created.",
        id=cat.id,
        cat=_cat_to_response(cat),
    )


@router.put("/{cat_id}", response_model=CatUpdatedResponse)
async def update_cat(
    cat_id: int,
    data: CatWrite,
    user: User = Depends(require_user),
    service: CatService = Depends(get_cat_service),
) -> CatUpdatedResponse:
    """Replace a cat's fields. Only its owner, or anyone for an unowned cat, may do this."""
    cat = await service.update_cat(user, cat_id, data)
    return CatUpdatedResponse(
        message=f"Cat with ID {cat_id} successfully updated.",
        cat=_cat_to_response(cat),
    )


@router.delete("/{cat_id}", response_model=CatDeletedResponse)
async def delete_cat(
    cat_id: int,
    user: User = Depends(require_user),
    service: CatService = Depends(get_cat_service),
) -> CatDeletedResponse:
    """Delete a cat, subject to the same ownership rule as updates."""
    await service.delete_cat(user, cat_id)
    return CatDeletedResponse(message=f"Cat with ID {cat_id} successfully deleted.", id=cat_id)


@tags_router.get("/tags", response_model=TagListResponse)
async def list_tags(service: CatService = Depends(get_cat_service)) -> TagListResponse:
    """Distinct tags for the gallery filter. Public."""
    return TagListResponse(tags=await service.list_tags())
