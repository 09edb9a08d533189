"""Pydantic DTOs (Data Transfer Objects) for the Cat feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from cattery.domain.entities import CatGender


class CatWrite(BaseModel):
    """Body of POST /cats and PUT /cats/{id}.

    ``name`` and ``tag`` are checked by the service so that a missing and a
    blank value produce the same error. On PUT, absent optional fields clear
    the stored value, except ``img`` which is kept when absent or blank.
    """

    name: str | None = Field(None, max_length=100, examples=["Tom"])
    tag: str | None = Field(None, max_length=100, examples=["Tabby"])
    description: str | None = Field(None, max_length=2000)
    img: str | None = Field(None, max_length=2048)
    age: int | None = Field(None, ge=0, le=40)
    origin: str | None = Field(None, max_length=100)
    gender: CatGender | None = None


class CatResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    tag: str
    description: str | None
    img: str
    age: int | None
    origin: str | None
    gender: CatGender | None
    owner_id: int | None
    created_at: datetime

    model_config = {"from_attributes": True}


class CatListResponse(BaseModel):
    """Paginated gallery envelope."""

    cats: list[CatResponse]
    total_count: int = Field(serialization_alias="totalCount")
    total_pages: int = Field(serialization_alias="totalPages")
    current_page: int = Field(serialization_alias="currentPage")
    limit: int


class TagListResponse(BaseModel):
    tags: list[str]


class CatCreatedResponse(BaseModel):
    message: str
    id: int
    cat: CatResponse


class CatUpdatedResponse(BaseModel):
    message: str
    cat: CatResponse


class CatDeletedResponse(BaseModel):
    message: str
    id: int
