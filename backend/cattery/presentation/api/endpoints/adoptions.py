"""Adoption endpoints: the caller's adopt / un-adopt list."""

from fastapi import APIRouter, Depends, status

from cattery.application.schemas import (
    AdoptedCatResponse,
    AdoptionListResponse,
    AdoptionStatusResponse,
    AdoptRequest,
    AdoptResponse,
    MessageResponse,
)
from cattery.application.services import AdoptionService
from cattery.domain.entities import User
from cattery.infrastructure.dependencies import (
    get_adoption_service,
    get_current_user,
    require_user,
)

router = APIRouter(prefix="/adoptions", tags=["Adoptions"])


@router.post("", response_model=AdoptResponse, status_code=status.HTTP_201_CREATED)
async def adopt_cat(
    data: AdoptRequest,
    user: User = Depends(require_user),
    service: AdoptionService = Depends(get_adoption_service),
) -> AdoptResponse:
    """Adopt a cat. Adopting the same cat twice is a 409."""
    adoption = await service.adopt(user, data.cat_id)
    return AdoptResponse(message="Cat adopted successfully!", cat_id=adoption.cat_id)


@router.get("", response_model=AdoptionListResponse)
async def list_adoptions(
    user: User = Depends(require_user),
    service: AdoptionService = Depends(get_adoption_service),
) -> AdoptionListResponse:
    """Cats adopted by the caller, most recent first."""
    adopted = await service.list_adoptions(user)
    return AdoptionListResponse(
        adoptions=[
            AdoptedCatResponse.model_validate(
                {**vars(a.cat), "adopted_at": a.adopted_at}
            )
            for a in adopted
        ]
    )


@router.get("/cat/{cat_id}", response_model=AdoptionStatusResponse)
async def adoption_status(
    cat_id: int,
    user: User | None = Depends(get_current_user),
    service: AdoptionService = Depends(get_adoption_service),
) -> AdoptionStatusResponse:
    """How many users adopted this cat, and whether the caller is one of them."""
    result = await service.status(user, cat_id)
    return AdoptionStatusResponse(
        cat_id=result.cat_id,
        count=result.count,
        user_adopted=result.user_adopted,
    )


@router.delete("/{cat_id}", response_model=MessageResponse)
async def unadopt_cat(
    cat_id: int,
    user: User = Depends(require_user),
    service: AdoptionService = Depends(get_adoption_service),
) -> MessageResponse:
    """Remove the caller's adoption of a cat."""
    await service.unadopt(user, cat_id)
    return MessageResponse(message="Adoption removed.")
