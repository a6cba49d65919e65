"""Common value objects shared across the domain."""

from .ids import CategoryId, GenreId

__all__ = [
    "CategoryId",
    "GenreId",
]
