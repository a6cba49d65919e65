"""Pydantic schemas for Genre API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from catalog.infrastructure.common.schemas import PaginatedResponse


class GenreCreateRequest(BaseModel):
    """Schema for creating a Genre."""

    name: str = Field(..., description="Genre name")
    is_active: bool = Field(True, description="Whether the genre is active")
    categories_ids: list[UUID] | None = Field(
        None, description="Ids of the categories the genre belongs to"
    )


class GenreUpdateRequest(BaseModel):
    """Schema for updating a Genre."""

    name: str = Field(..., description="Genre name")
    is_active: bool | None = Field(None, description="New activation flag")
    categories_ids: list[UUID] | None = Field(
        None,
        description="Replacement category ids; omit to keep the current ones, [] to remove all",
    )


class CategoryInGenre(BaseModel):
    """Minimal category schema for genre responses."""

    id: UUID
    name: str | None = None

    model_config = {"from_attributes": True}


class Genre(BaseModel):
    """Schema for Genre response."""

    id: UUID
    name: str
    is_active: bool
    created_at: datetime
    categories: list[CategoryInGenre]

    model_config = {"from_attributes": True}


class GenresListResponse(PaginatedResponse[Genre]):
    """Schema for a page of genres."""
