from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

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
from catalog.application.common.pagination import SearchOrder
from catalog.config import Settings
from catalog.core import container
from catalog.domain.common import DomainError
from catalog.exceptions import CatalogError
from catalog.infrastructure.categories.schemas import (
    CategoriesListResponse,
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
)
from catalog.infrastructure.common.di import get_app_settings, inject_use_case

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryCreateRequest,
    use_case: CreateCategoryUseCase = Depends(inject_use_case(container.create_category_use_case)),
) -> Category:
    """
    Create a new category.

    Returns:
        The created category

    Raises:
        HTTPException: 422 if name or description are invalid
    """
    try:
        output = await use_case.create_category(
            name=request.name,
            description=request.description,
            is_active=request.is_active,
        )
        return Category.model_validate(output)
    except CatalogError:
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except DomainError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.error("failed_to_create_category", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("", response_model=CategoriesListResponse, status_code=status.HTTP_200_OK)
async def list_categories(
    use_case: ListCategoriesUseCase = Depends(inject_use_case(container.list_categories_use_case)),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    per_page: int | None = Query(
        None, ge=1, description="Number of categories per page (defaults to DEFAULT_PER_PAGE)"
    ),
    search: str = Query("", description="Case-insensitive filter on the category name"),
    sort: str = Query("", description="Sort field: name, id or createdAt"),
    direction: SearchOrder = Query(SearchOrder.ASC, alias="dir", description="Sort direction"),
    settings: Settings = Depends(get_app_settings),
) -> CategoriesListResponse:
    """
    List categories page by page.

    Returns:
        CategoriesListResponse with the page items and pagination info
    """
    try:
        output = await use_case.list_categories(
            page=page,
            per_page=per_page if per_page is not None else settings.DEFAULT_PER_PAGE,
            search=search,
            sort=sort,
            direction=direction,
        )
        return CategoriesListResponse.model_validate(output, from_attributes=True)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.error("failed_to_list_categories", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{category_id}", response_model=Category, status_code=status.HTTP_200_OK)
async def get_category(
    category_id: UUID,
    use_case: GetCategoryUseCase = Depends(inject_use_case(container.get_category_use_case)),
) -> Category:
    """
    Get a category by id.

    Raises:
        HTTPException: 404 if the category is not found
    """
    try:
        return Category.model_validate(await use_case.get_category(category_id))
    except CatalogError:
        raise
    except Exception as e:
        logger.error("failed_to_get_category", category_id=str(category_id), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.put("/{category_id}", response_model=Category, status_code=status.HTTP_200_OK)
async def update_category(
    category_id: UUID,
    request: CategoryUpdateRequest,
    use_case: UpdateCategoryUseCase = Depends(inject_use_case(container.update_category_use_case)),
) -> Category:
    """
    Update a category; omitted description and is_active keep their value.

    Raises:
        HTTPException: 404 if the category is not found, 422 if the values are invalid
    """
    try:
        output = await use_case.update_category(
            category_id,
            name=request.name,
            description=request.description,
            is_active=request.is_active,
        )
        return Category.model_validate(output)
    except CatalogError:
        raise
    except DomainError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.error("failed_to_update_category", category_id=str(category_id), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: UUID,
    use_case: DeleteCategoryUseCase = Depends(inject_use_case(container.delete_category_use_case)),
) -> None:
    """
    Delete a category (hard delete).

    Raises:
        HTTPException: 404 if the category is not found
    """
    try:
        await use_case.delete_category(category_id)
    except CatalogError:
        raise
    except Exception as e:
        logger.error("failed_to_delete_category", category_id=str(category_id), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
