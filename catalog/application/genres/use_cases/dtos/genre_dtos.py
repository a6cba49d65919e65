from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from catalog.domain.categories.entities.category import Category
from catalog.domain.genres.entities.genre import Genre


@dataclass
class GenreCategoryOutput:
    """Category reference inside a genre output; name is filled in by list queries."""

    id: UUID
    name: str | None = None


@dataclass
class GenreOutput:
    """Genre as returned by genre use cases."""

    id: UUID
    name: str
    is_active: bool
    created_at: datetime
    categories: list[GenreCategoryOutput] = field(default_factory=list)

    @classmethod
    def from_genre(cls, genre: Genre) -> "GenreOutput":
        return cls(
            id=genre.id.value,
            name=genre.name,
            is_active=genre.is_active,
            created_at=genre.created_at,
            categories=[
                GenreCategoryOutput(id=category_id.value) for category_id in genre.categories
            ],
        )

    def fill_with_categories_names(self, categories: Iterable[Category]) -> None:
        """
        Set the name of each referenced category.

        References without a matching category keep name=None.
        """
        names = {category.id.value: category.name for category in categories}
        for category in self.categories:
            category.name = names.get(category.id)
