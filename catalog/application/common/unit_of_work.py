"""
Unit of Work interface.

The Unit of Work coordinates writing out the changes of a single use case
invocation as one atomic transaction.

Example:
    class DeleteCategoryUseCase:
        async def delete_category(self, category_id: UUID) -> None:
            async with self.unit_of_work:
                category = await self.category_repository.get(CategoryId(category_id))
                await self.category_repository.delete(category)
                await self.unit_of_work.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    Commit is always explicit. Leaving the async context because of an
    exception rolls the transaction back.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        raise NotImplementedError

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all changes made within the unit of work."""
        raise NotImplementedError

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()
