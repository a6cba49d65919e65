"""Protocol for Category repository."""

from collections.abc import Sequence
from typing import Protocol

from catalog.application.common.pagination import SearchInput, SearchOutput
from catalog.domain.categories.entities.category import Category
from catalog.domain.common.value_objects.ids import CategoryId


class CategoryRepositoryProtocol(Protocol):
    """Protocol for Category repository operations."""

    async def insert(self, category: Category) -> None:
        """
        Stage a new category for persistence.

        Args:
            category: The category to insert
        """
        ...

    async def get(self, category_id: CategoryId) -> Category:
        """
        Load a category by id.

        Args:
            category_id: The category ID

        Returns:
            The category entity

        Raises:
            CategoryNotFoundError: If no category has this id
        """
        ...

    async def update(self, category: Category) -> None:
        """
        Persist the scalar fields of an existing category.

        Raises:
            CategoryNotFoundError: If the category no longer exists
        """
        ...

    async def delete(self, category: Category) -> None:
        """Remove a category."""
        ...

    async def search(self, search_input: SearchInput) -> SearchOutput[Category]:
        """
        Filter, order and paginate categories.

        Args:
            search_input: Page, page size, name filter and ordering

        Returns:
            The requested page and the total number of matches
        """
        ...

    async def get_ids_list_by_ids(self, ids: Sequence[CategoryId]) -> list[CategoryId]:
        """
        Return the subset of ids that exist in the store.

        Args:
            ids: Category ids to look up

        Returns:
            Ids that exist; unknown ids are omitted
        """
        ...

    async def get_list_by_ids(self, ids: Sequence[CategoryId]) -> list[Category]:
        """
        Fetch the categories with the given ids in a single query.

        Args:
            ids: Category ids to look up

        Returns:
            Category entities; unknown ids are omitted
        """
        ...
