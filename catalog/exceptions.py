"""Custom exception hierarchy for the catalog application."""

from collections.abc import Iterable

from starlette import status


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CatalogError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class CategoryNotFoundError(NotFoundError):
    """Category not found error."""

    def __init__(self, category_id: object) -> None:
        self.category_id = category_id
        super().__init__(f"Category '{category_id}' not found.")


class GenreNotFoundError(NotFoundError):
    """Genre not found error."""

    def __init__(self, genre_id: object) -> None:
        self.genre_id = genre_id
        super().__init__(f"Genre '{genre_id}' not found.")


class RelatedAggregateError(CatalogError):
    """An aggregate references another aggregate that does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=422)


class RelatedCategoriesNotFoundError(RelatedAggregateError):
    """A genre references category ids that are not in the category store."""

    def __init__(self, category_ids: Iterable[object]) -> None:
        self.category_ids = list(category_ids)
        super().__init__(
            "Related category id (or ids) not found: "
            + ", ".join(str(category_id) for category_id in self.category_ids)
        )
