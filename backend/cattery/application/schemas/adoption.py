"""Pydantic DTOs for adoption links."""

from datetime import datetime

from pydantic import BaseModel, Field

from .cat import CatResponse


class AdoptRequest(BaseModel):
    cat_id: int = Field(..., gt=0)


class AdoptResponse(BaseModel):
    message: str
    cat_id: int = Field(serialization_alias="catId")


class AdoptedCatResponse(CatResponse):
    """A cat in the caller's adoption list, stamped with when it was adopted."""

    adopted_at: datetime


class AdoptionListResponse(BaseModel):
    adoptions: list[AdoptedCatResponse]


class AdoptionStatusResponse(BaseModel):
    cat_id: int = Field(serialization_alias="catId")
    count: int
    user_adopted: bool = Field(serialization_alias="userAdopted")
