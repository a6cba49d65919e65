"""
Search and pagination types shared by list queries.

Example:
    search_input = SearchInput(page=2, per_page=10, search="horror", order_by="name")
    output = await genre_repository.search(search_input)
    PaginatedListOutput.from_search_output(output, GenreOutput.from_genre)
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15


class SearchOrder(str, Enum):
    """Sort direction of a search."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SearchInput:
    """
    Parameters of a paginated, filtered search.

    Attributes:
        page: Current page number (1-indexed)
        per_page: Number of items per page
        search: Case-insensitive substring matched against names; blank disables filtering
        order_by: Sort field name, case-insensitive; unknown names fall back to the default
        order: Sort direction
    """

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    search: str = ""
    order_by: str = ""
    order: SearchOrder = SearchOrder.ASC

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.per_page < 1:
            raise ValueError("Per page must be at least 1")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.per_page

    @property
    def has_search(self) -> bool:
        return bool(self.search and self.search.strip())


@dataclass(frozen=True)
class SearchOutput(Generic[T]):
    """
    One page of search results.

    Attributes:
        current_page: Page number that was requested
        per_page: Page size that was requested
        total: Number of items matching the filter, before pagination
        items: Items of the requested page
    """

    current_page: int
    per_page: int
    total: int
    items: list[T]


@dataclass
class PaginatedListOutput(Generic[T]):
    """Paginated use case output."""

    page: int
    per_page: int
    total: int
    items: list[T]

    @classmethod
    def from_search_output(
        cls, output: SearchOutput[U], mapper: Callable[[U], T]
    ) -> "PaginatedListOutput[T]":
        return cls(
            page=output.current_page,
            per_page=output.per_page,
            total=output.total,
            items=[mapper(item) for item in output.items],
        )
