"""List genres use case."""

from catalog.application.categories.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from catalog.application.common.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    PaginatedListOutput,
    SearchInput,
    SearchOrder,
)
from catalog.application.genres.protocols.genre_repository import GenreRepositoryProtocol
from catalog.application.genres.use_cases.dtos import GenreOutput
from catalog.domain.common.value_objects.ids import CategoryId


class ListGenresUseCase:
    """Use case for searching genres with their category names."""

    def __init__(
        self,
        genre_repository: GenreRepositoryProtocol,
        category_repository: CategoryRepositoryProtocol,
    ) -> None:
        self.genre_repository = genre_repository
        self.category_repository = category_repository

    async def list_genres(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        search: str = "",
        sort: str = "",
        direction: SearchOrder = SearchOrder.ASC,
    ) -> PaginatedListOutput[GenreOutput]:
        """
        List genres page by page.

        The categories of every genre on the page are fetched in a single
        query to fill in their names. Category ids that no longer resolve
        keep name=None.

        Args:
            page: Page number (1-indexed)
            per_page: Page size
            search: Case-insensitive name filter; blank lists everything
            sort: Sort field (name, id or createdAt); unknown fields sort by name
            direction: Sort direction

        Returns:
            The requested page with the total number of matches
        """
        output = await self.genre_repository.search(
            SearchInput(page=page, per_page=per_page, search=search, order_by=sort, order=direction)
        )
        result = PaginatedListOutput.from_search_output(output, GenreOutput.from_genre)

        related_ids: dict[CategoryId, None] = {}
        for genre in output.items:
            related_ids.update(dict.fromkeys(genre.categories))

        if related_ids:
            categories = await self.category_repository.get_list_by_ids(list(related_ids))
            for genre_output in result.items:
                genre_output.fill_with_categories_names(categories)

        return result
