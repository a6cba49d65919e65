from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from catalog.domain.categories.entities.category import Category


@dataclass
class CategoryOutput:
    """Category as returned by category use cases."""

    id: UUID
    name: str
    description: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_category(cls, category: Category) -> "CategoryOutput":
        return cls(
            id=category.id.value,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
        )
