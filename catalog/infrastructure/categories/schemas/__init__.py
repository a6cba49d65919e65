"""Category API schemas."""

from catalog.infrastructure.categories.schemas.category_schemas import (
    CategoriesListResponse,
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
)

__all__ = [
    "CategoriesListResponse",
    "Category",
    "CategoryCreateRequest",
    "CategoryUpdateRequest",
]
