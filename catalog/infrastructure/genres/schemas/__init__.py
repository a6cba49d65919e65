"""Genre API schemas."""

from catalog.infrastructure.genres.schemas.genre_schemas import (
    CategoryInGenre,
    Genre,
    GenreCreateRequest,
    GenresListResponse,
    GenreUpdateRequest,
)

__all__ = [
    "CategoryInGenre",
    "Genre",
    "GenreCreateRequest",
    "GenreUpdateRequest",
    "GenresListResponse",
]
