"""Unit tests for category use cases with mocked repositories."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from catalog.application.categories.use_cases.category_management.create_category_use_case import (
    CreateCategoryUseCase,
)
from catalog.application.categories.use_cases.category_management.delete_category_use_case import (
    DeleteCategoryUseCase,
)
from catalog.application.categories.use_cases.category_management.get_category_use_case import (
    GetCategoryUseCase,
)
from catalog.application.categories.use_cases.category_management.update_category_use_case import (
    UpdateCategoryUseCase,
)
from catalog.application.categories.use_cases.category_queries.list_categories_use_case import (
    ListCategoriesUseCase,
)
from catalog.application.common.pagination import SearchInput, SearchOutput
from catalog.domain.categories.entities.category import Category
from catalog.domain.common.exceptions import EntityValidationError
from catalog.domain.common.value_objects.ids import CategoryId
from catalog.exceptions import CategoryNotFoundError


@pytest.fixture
def category_repository() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def unit_of_work() -> MagicMock:
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    return uow


@pytest.mark.asyncio
async def test_create_category(category_repository: AsyncMock, unit_of_work: MagicMock) -> None:
    """Test that a new category is inserted and committed."""
    use_case = CreateCategoryUseCase(category_repository, unit_of_work)

    output = await use_case.create_category(name="Movies", description="Feature films")

    inserted: Category = category_repository.insert.await_args.args[0]
    assert inserted.name == "Movies"
    assert output.id == inserted.id.value
    assert output.description == "Feature films"
    assert output.is_active is True
    unit_of_work.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_invalid_category_is_not_persisted(
    category_repository: AsyncMock, unit_of_work: MagicMock
) -> None:
    use_case = CreateCategoryUseCase(category_repository, unit_of_work)

    with pytest.raises(EntityValidationError, match="Name should be at least 3 characters long"):
        await use_case.create_category(name="ab")

    category_repository.insert.assert_not_awaited()
    unit_of_work.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_category(category_repository: AsyncMock) -> None:
    category = Category.create(name="Movies")
    category_repository.get.return_value = category

    output = await GetCategoryUseCase(category_repository).get_category(category.id.value)

    category_repository.get.assert_awaited_once_with(category.id)
    assert output.name == "Movies"


@pytest.mark.asyncio
async def test_get_unknown_category_fails(category_repository: AsyncMock) -> None:
    """Test the not found message format."""
    category_id = uuid4()
    category_repository.get.side_effect = CategoryNotFoundError(CategoryId(category_id))

    with pytest.raises(CategoryNotFoundError) as exc_info:
        await GetCategoryUseCase(category_repository).get_category(category_id)

    assert str(exc_info.value) == f"Category '{category_id}' not found."


@pytest.mark.asyncio
async def test_update_category_partially(
    category_repository: AsyncMock, unit_of_work: MagicMock
) -> None:
    """Test that omitted fields keep their value."""
    category = Category.create(name="Movies", description="Feature films", is_active=True)
    category_repository.get.return_value = category

    output = await UpdateCategoryUseCase(category_repository, unit_of_work).update_category(
        category.id.value, name="Films"
    )

    assert output.name == "Films"
    assert output.description == "Feature films"
    assert output.is_active is True
    category_repository.update.assert_awaited_once_with(category)
    unit_of_work.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_category_all_fields(
    category_repository: AsyncMock, unit_of_work: MagicMock
) -> None:
    category = Category.create(name="Movies", description="Feature films", is_active=True)
    category_repository.get.return_value = category

    output = await UpdateCategoryUseCase(category_repository, unit_of_work).update_category(
        category.id.value, name="Series", description="Episodes", is_active=False
    )

    assert (output.name, output.description, output.is_active) == ("Series", "Episodes", False)


@pytest.mark.asyncio
async def test_update_category_with_invalid_name_is_not_persisted(
    category_repository: AsyncMock, unit_of_work: MagicMock
) -> None:
    category = Category.create(name="Movies")
    category_repository.get.return_value = category

    with pytest.raises(EntityValidationError):
        await UpdateCategoryUseCase(category_repository, unit_of_work).update_category(
            category.id.value, name=""
        )

    category_repository.update.assert_not_awaited()
    unit_of_work.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_category(category_repository: AsyncMock, unit_of_work: MagicMock) -> None:
    category = Category.create(name="Movies")
    category_repository.get.return_value = category

    await DeleteCategoryUseCase(category_repository, unit_of_work).delete_category(
        category.id.value
    )

    category_repository.delete.assert_awaited_once_with(category)
    unit_of_work.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_list_categories(category_repository: AsyncMock) -> None:
    movies = Category.create(name="Movies")
    category_repository.search.return_value = SearchOutput(
        current_page=1, per_page=15, total=1, items=[movies]
    )

    result = await ListCategoriesUseCase(category_repository).list_categories(search="mov")

    category_repository.search.assert_awaited_once_with(SearchInput(search="mov"))
    assert result.total == 1
    assert [item.name for item in result.items] == ["Movies"]
