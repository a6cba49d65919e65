"""Integration tests for CategoryRepository against SQLite."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.common.pagination import SearchInput, SearchOrder
from catalog.domain.categories.entities.category import Category
from catalog.domain.common.value_objects.ids import CategoryId
from catalog.exceptions import CategoryNotFoundError
from catalog.infrastructure.categories.repositories.category_repository import (
    CategoryRepository,
)
from tests.conftest import create_test_category, minutes_ago


class TestCategoryRepositoryCrud:
    """Test suite for insert, get, update and delete."""

    @pytest.mark.asyncio
    async def test_insert_and_get(self, db_session: AsyncSession) -> None:
        repository = CategoryRepository(db_session)
        category = Category.create(name="Movies", description="Feature films")

        await repository.insert(category)
        await db_session.commit()
        loaded = await CategoryRepository(db_session).get(category.id)

        assert loaded == category
        assert loaded.name == "Movies"
        assert loaded.description == "Feature films"
        assert loaded.is_active is True
        assert loaded.created_at == category.created_at

    @pytest.mark.asyncio
    async def test_get_unknown_category(self, db_session: AsyncSession) -> None:
        """Test the not found message format."""
        category_id = CategoryId.generate()

        with pytest.raises(CategoryNotFoundError) as exc_info:
            await CategoryRepository(db_session).get(category_id)

        assert str(exc_info.value) == f"Category '{category_id}' not found."

    @pytest.mark.asyncio
    async def test_update(self, db_session: AsyncSession) -> None:
        row = await create_test_category(db_session, name="Movies")
        repository = CategoryRepository(db_session)
        category = await repository.get(CategoryId(row.id))

        category.update("Films", "Updated")
        category.deactivate()
        await repository.update(category)
        await db_session.commit()

        loaded = await repository.get(category.id)
        assert (loaded.name, loaded.description, loaded.is_active) == ("Films", "Updated", False)

    @pytest.mark.asyncio
    async def test_delete(self, db_session: AsyncSession) -> None:
        row = await create_test_category(db_session)
        repository = CategoryRepository(db_session)
        category = await repository.get(CategoryId(row.id))

        await repository.delete(category)
        await db_session.commit()

        with pytest.raises(CategoryNotFoundError):
            await repository.get(category.id)


class TestCategoryRepositoryLookups:
    """Test suite for the id-based batch lookups."""

    @pytest.mark.asyncio
    async def test_get_ids_list_by_ids_omits_unknown(self, db_session: AsyncSession) -> None:
        movies = await create_test_category(db_session, name="Movies")
        series = await create_test_category(db_session, name="Series")
        unknown = CategoryId.generate()

        found = await CategoryRepository(db_session).get_ids_list_by_ids(
            [CategoryId(movies.id), unknown, CategoryId(series.id)]
        )

        assert set(found) == {CategoryId(movies.id), CategoryId(series.id)}

    @pytest.mark.asyncio
    async def test_get_list_by_ids(self, db_session: AsyncSession) -> None:
        movies = await create_test_category(db_session, name="Movies")
        await create_test_category(db_session, name="Series")

        categories = await CategoryRepository(db_session).get_list_by_ids(
            [CategoryId(movies.id), CategoryId.generate()]
        )

        assert [category.name for category in categories] == ["Movies"]

    @pytest.mark.asyncio
    async def test_empty_lookups(self, db_session: AsyncSession) -> None:
        repository = CategoryRepository(db_session)

        assert await repository.get_ids_list_by_ids([]) == []
        assert await repository.get_list_by_ids([]) == []


class TestCategoryRepositorySearch:
    """Test suite for filtering, ordering and paging."""

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, db_session: AsyncSession) -> None:
        for name in ["Movies", "Documentary movies", "Series"]:
            await create_test_category(db_session, name=name)

        output = await CategoryRepository(db_session).search(SearchInput(search="MOVIE"))

        assert output.total == 2
        assert [category.name for category in output.items] == ["Documentary movies", "Movies"]

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, db_session: AsyncSession) -> None:
        await create_test_category(db_session, name="100% Action")
        await create_test_category(db_session, name="Action")

        output = await CategoryRepository(db_session).search(SearchInput(search="%"))

        assert [category.name for category in output.items] == ["100% Action"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("page", "per_page", "expected_count"),
        [(1, 3, 3), (2, 3, 3), (3, 3, 1), (4, 3, 0), (1, 10, 7)],
    )
    async def test_page_sizes(
        self, db_session: AsyncSession, page: int, per_page: int, expected_count: int
    ) -> None:
        """Test that every page holds min(per_page, what is left) items."""
        for index in range(7):
            await create_test_category(db_session, name=f"Category {index}")

        output = await CategoryRepository(db_session).search(
            SearchInput(page=page, per_page=per_page)
        )

        assert output.total == 7
        assert output.current_page == page
        assert output.per_page == per_page
        assert len(output.items) == expected_count

    @pytest.mark.asyncio
    @pytest.mark.parametrize("order", [SearchOrder.ASC, SearchOrder.DESC])
    async def test_order_by_created_at(self, db_session: AsyncSession, order: SearchOrder) -> None:
        await create_test_category(db_session, name="Oldest", created_at=minutes_ago(30))
        await create_test_category(db_session, name="Newest", created_at=minutes_ago(1))
        await create_test_category(db_session, name="Middle", created_at=minutes_ago(10))

        output = await CategoryRepository(db_session).search(
            SearchInput(order_by="createdAt", order=order)
        )

        expected = ["Oldest", "Middle", "Newest"]
        if order == SearchOrder.DESC:
            expected.reverse()
        assert [category.name for category in output.items] == expected

    @pytest.mark.asyncio
    async def test_order_by_id(self, db_session: AsyncSession) -> None:
        rows = [await create_test_category(db_session, name=f"Cat {i}") for i in range(4)]

        output = await CategoryRepository(db_session).search(
            SearchInput(order_by="ID", order=SearchOrder.DESC)
        )

        assert [category.id.value for category in output.items] == sorted(
            (row.id for row in rows), reverse=True
        )

    @pytest.mark.asyncio
    async def test_unknown_order_falls_back_to_name(self, db_session: AsyncSession) -> None:
        for name in ["Series", "Anime", "Movies"]:
            await create_test_category(db_session, name=name)

        output = await CategoryRepository(db_session).search(
            SearchInput(order_by="popularity", order=SearchOrder.DESC)
        )

        assert [category.name for category in output.items] == ["Anime", "Movies", "Series"]
