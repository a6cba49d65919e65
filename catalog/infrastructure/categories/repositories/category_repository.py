"""Repository for Category domain entity."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.common.pagination import SearchInput, SearchOutput
from catalog.domain.categories.entities.category import Category
from catalog.domain.common.value_objects.ids import CategoryId
from catalog.exceptions import CategoryNotFoundError
from catalog.infrastructure.categories.mappers.category_mapper import CategoryMapper
from catalog.infrastructure.common.search import load_page
from catalog.models import Category as CategoryORM


class CategoryRepository:
    """Repository for Category domain entity."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = CategoryMapper()

    async def _find_orm(self, category_id: CategoryId) -> CategoryORM:
        stmt = select(CategoryORM).where(CategoryORM.id == category_id.value)
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()
        if orm_model is None:
            raise CategoryNotFoundError(category_id)
        return orm_model

    async def insert(self, category: Category) -> None:
        self.db.add(self.mapper.to_orm(category))
        await self.db.flush()

    async def get(self, category_id: CategoryId) -> Category:
        """
        Get a category by id.

        Raises:
            CategoryNotFoundError: If no category has this id
        """
        return self.mapper.to_domain(await self._find_orm(category_id))

    async def update(self, category: Category) -> None:
        existing = await self._find_orm(category.id)
        self.mapper.to_orm(category, existing)
        await self.db.flush()

    async def delete(self, category: Category) -> None:
        orm_model = await self._find_orm(category.id)
        await self.db.delete(orm_model)
        await self.db.flush()

    async def search(self, search_input: SearchInput) -> SearchOutput[Category]:
        """
        Filter by name, order and paginate categories.

        Args:
            search_input: Page, page size, name filter and ordering

        Returns:
            SearchOutput with the page items and the total number of matches
        """
        rows, total = await load_page(self.db, CategoryORM, search_input)
        return SearchOutput(
            current_page=search_input.page,
            per_page=search_input.per_page,
            total=total,
            items=[self.mapper.to_domain(orm) for orm in rows],
        )

    async def get_ids_list_by_ids(self, ids: Sequence[CategoryId]) -> list[CategoryId]:
        if not ids:
            return []

        stmt = select(CategoryORM.id).where(CategoryORM.id.in_([id.value for id in ids]))
        found = (await self.db.execute(stmt)).scalars().all()
        return [CategoryId(value) for value in found]

    async def get_list_by_ids(self, ids: Sequence[CategoryId]) -> list[Category]:
        if not ids:
            return []

        stmt = select(CategoryORM).where(CategoryORM.id.in_([id.value for id in ids]))
        orm_models = (await self.db.execute(stmt)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]
