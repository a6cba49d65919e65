"""Create category use case."""

import structlog

from catalog.application.categories.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from catalog.application.categories.use_cases.dtos import CategoryOutput
from catalog.application.common.unit_of_work import UnitOfWork
from catalog.domain.categories.entities.category import Category

logger = structlog.get_logger(__name__)


class CreateCategoryUseCase:
    """Use case for creating categories."""

    def __init__(
        self,
        category_repository: CategoryRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.category_repository = category_repository
        self.unit_of_work = unit_of_work

    async def create_category(
        self, name: str, description: str = "", is_active: bool = True
    ) -> CategoryOutput:
        """
        Create a new category.

        Args:
            name: Category name (3 to 255 characters)
            description: Category description (at most 10000 characters)
            is_active: Whether the category starts active

        Returns:
            The created category

        Raises:
            EntityValidationError: If name or description are invalid
        """
        category = Category.create(name=name, description=description, is_active=is_active)

        async with self.unit_of_work:
            await self.category_repository.insert(category)
            await self.unit_of_work.commit()

        logger.info("created_category", category_id=str(category.id), name=category.name)
        return CategoryOutput.from_category(category)
