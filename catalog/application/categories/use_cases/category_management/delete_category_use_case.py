"""Delete category use case."""

from uuid import UUID

import structlog

from catalog.application.categories.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from catalog.application.common.unit_of_work import UnitOfWork
from catalog.domain.common.value_objects.ids import CategoryId

logger = structlog.get_logger(__name__)


class DeleteCategoryUseCase:
    """Use case for deleting categories."""

    def __init__(
        self,
        category_repository: CategoryRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.category_repository = category_repository
        self.unit_of_work = unit_of_work

    async def delete_category(self, category_id: UUID) -> None:
        """
        Delete a category (hard delete).

        Args:
            category_id: ID of the category to delete

        Raises:
            CategoryNotFoundError: If category is not found
        """
        async with self.unit_of_work:
            category = await self.category_repository.get(CategoryId(category_id))
            await self.category_repository.delete(category)
            await self.unit_of_work.commit()

        logger.info("deleted_category", category_id=str(category_id))
