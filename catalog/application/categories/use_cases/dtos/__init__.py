"""DTOs for category use cases."""

from catalog.application.categories.use_cases.dtos.category_dtos import CategoryOutput

__all__ = ["CategoryOutput"]
