"""List categories use case."""

from catalog.application.categories.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from catalog.application.categories.use_cases.dtos import CategoryOutput
from catalog.application.common.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    PaginatedListOutput,
    SearchInput,
    SearchOrder,
)


class ListCategoriesUseCase:
    """Use case for searching categories."""

    def __init__(self, category_repository: CategoryRepositoryProtocol) -> None:
        self.category_repository = category_repository

    async def list_categories(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        search: str = "",
        sort: str = "",
        direction: SearchOrder = SearchOrder.ASC,
    ) -> PaginatedListOutput[CategoryOutput]:
        """
        List categories page by page.

        Args:
            page: Page number (1-indexed)
            per_page: Page size
            search: Case-insensitive name filter; blank lists everything
            sort: Sort field (name, id or createdAt); unknown fields sort by name
            direction: Sort direction

        Returns:
            The requested page with the total number of matches
        """
        output = await self.category_repository.search(
            SearchInput(page=page, per_page=per_page, search=search, order_by=sort, order=direction)
        )
        return PaginatedListOutput.from_search_output(output, CategoryOutput.from_category)
