"""Get category use case."""

from uuid import UUID

from catalog.application.categories.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from catalog.application.categories.use_cases.dtos import CategoryOutput
from catalog.domain.common.value_objects.ids import CategoryId


class GetCategoryUseCase:
    """Use case for reading a single category."""

    def __init__(self, category_repository: CategoryRepositoryProtocol) -> None:
        self.category_repository = category_repository

    async def get_category(self, category_id: UUID) -> CategoryOutput:
        """
        Get a category by id.

        Raises:
            CategoryNotFoundError: If category is not found
        """
        category = await self.category_repository.get(CategoryId(category_id))
        return CategoryOutput.from_category(category)
