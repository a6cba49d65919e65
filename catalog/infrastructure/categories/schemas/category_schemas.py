"""Pydantic schemas for Category API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from catalog.infrastructure.common.schemas import PaginatedResponse


class CategoryCreateRequest(BaseModel):
    """Schema for creating a Category."""

    name: str = Field(..., description="Category name (3 to 255 characters)")
    description: str = Field("", description="Category description (at most 10000 characters)")
    is_active: bool = Field(True, description="Whether the category is active")


class CategoryUpdateRequest(BaseModel):
    """Schema for updating a Category; omitted optional fields keep their value."""

    name: str = Field(..., description="Category name (3 to 255 characters)")
    description: str | None = Field(None, description="New description")
    is_active: bool | None = Field(None, description="New activation flag")


class Category(BaseModel):
    """Schema for Category response."""

    id: UUID
    name: str
    description: str
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class CategoriesListResponse(PaginatedResponse[Category]):
    """Schema for a page of categories."""
