"""Update category use case."""

from uuid import UUID

import structlog

from catalog.application.categories.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from catalog.application.categories.use_cases.dtos import CategoryOutput
from catalog.application.common.unit_of_work import UnitOfWork
from catalog.domain.common.value_objects.ids import CategoryId

logger = structlog.get_logger(__name__)


class UpdateCategoryUseCase:
    """Use case for updating categories."""

    def __init__(
        self,
        category_repository: CategoryRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.category_repository = category_repository
        self.unit_of_work = unit_of_work

    async def update_category(
        self,
        category_id: UUID,
        name: str,
        description: str | None = None,
        is_active: bool | None = None,
    ) -> CategoryOutput:
        """
        Update a category.

        Fields passed as None keep their current value.

        Args:
            category_id: ID of the category to update
            name: New name
            description: New description (optional)
            is_active: New activation flag (optional)

        Returns:
            The updated category

        Raises:
            CategoryNotFoundError: If category is not found
            EntityValidationError: If the new values are invalid
        """
        async with self.unit_of_work:
            category = await self.category_repository.get(CategoryId(category_id))
            category.update(name, description)

            if is_active is not None and is_active != category.is_active:
                if is_active:
                    category.activate()
                else:
                    category.deactivate()

            await self.category_repository.update(category)
            await self.unit_of_work.commit()

        logger.info("updated_category", category_id=str(category.id))
        return CategoryOutput.from_category(category)
