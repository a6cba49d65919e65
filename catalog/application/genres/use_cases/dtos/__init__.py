"""DTOs for genre use cases."""

from catalog.application.genres.use_cases.dtos.genre_dtos import GenreCategoryOutput, GenreOutput

__all__ = ["GenreCategoryOutput", "GenreOutput"]
