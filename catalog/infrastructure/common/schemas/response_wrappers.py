"""Common response wrapper schemas for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic pagination wrapper."""

    page: int = Field(..., description="Current page number (1-indexed)")
    per_page: int = Field(..., description="Requested page size")
    total: int = Field(..., description="Number of matching items across all pages")
    items: list[T]
