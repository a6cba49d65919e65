from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from catalog.application.common.pagination import SearchOrder
from catalog.config import Settings
from catalog.application.genres.use_cases.genre_management.create_genre_use_case import (
    CreateGenreUseCase,
)
from catalog.application.genres.use_cases.genre_management.delete_genre_use_case import (
    DeleteGenreUseCase,
)
from catalog.application.genres.use_cases.genre_management.get_genre_use_case import (
    GetGenreUseCase,
)
from catalog.application.genres.use_cases.genre_management.update_genre_use_case import (
    UpdateGenreUseCase,
)
from catalog.application.genres.use_cases.genre_queries.list_genres_use_case import (
    ListGenresUseCase,
)
from catalog.core import container
from catalog.domain.common import DomainError
from catalog.exceptions import CatalogError
from catalog.infrastructure.common.di import get_app_settings, inject_use_case
from catalog.infrastructure.genres.schemas import (
    Genre,
    GenreCreateRequest,
    GenresListResponse,
    GenreUpdateRequest,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/genres", tags=["genres"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.post("", response_model=Genre, status_code=status.HTTP_201_CREATED)
async def create_genre(
    request: GenreCreateRequest,
    use_case: CreateGenreUseCase = Depends(inject_use_case(container.create_genre_use_case)),
) -> Genre:
    """
    Create a new genre linked to existing categories.

    Returns:
        The created genre with its category ids

    Raises:
        HTTPException: 422 if the name is empty or a category id does not exist
    """
    try:
        output = await use_case.create_genre(
            name=request.name,
            is_active=request.is_active,
            categories_ids=request.categories_ids,
        )
        return Genre.model_validate(output)
    except CatalogError:
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except DomainError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.error("failed_to_create_genre", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("", response_model=GenresListResponse, status_code=status.HTTP_200_OK)
async def list_genres(
    use_case: ListGenresUseCase = Depends(inject_use_case(container.list_genres_use_case)),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    per_page: int | None = Query(
        None, ge=1, description="Number of genres per page (defaults to DEFAULT_PER_PAGE)"
    ),
    search: str = Query("", description="Case-insensitive filter on the genre name"),
    sort: str = Query("", description="Sort field: name, id or createdAt"),
    direction: SearchOrder = Query(SearchOrder.ASC, alias="dir", description="Sort direction"),
    settings: Settings = Depends(get_app_settings),
) -> GenresListResponse:
    """
    List genres page by page, with the names of their categories.

    Returns:
        GenresListResponse with the page items and pagination info
    """
    try:
        output = await use_case.list_genres(
            page=page,
            per_page=per_page if per_page is not None else settings.DEFAULT_PER_PAGE,
            search=search,
            sort=sort,
            direction=direction,
        )
        return GenresListResponse.model_validate(output, from_attributes=True)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.error("failed_to_list_genres", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{genre_id}", response_model=Genre, status_code=status.HTTP_200_OK)
async def get_genre(
    genre_id: UUID,
    use_case: GetGenreUseCase = Depends(inject_use_case(container.get_genre_use_case)),
) -> Genre:
    """
    Get a genre by id.

    Raises:
        HTTPException: 404 if the genre is not found
    """
    try:
        return Genre.model_validate(await use_case.get_genre(genre_id))
    except CatalogError:
        raise
    except Exception as e:
        logger.error("failed_to_get_genre", genre_id=str(genre_id), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.put("/{genre_id}", response_model=Genre, status_code=status.HTTP_200_OK)
async def update_genre(
    genre_id: UUID,
    request: GenreUpdateRequest,
    use_case: UpdateGenreUseCase = Depends(inject_use_case(container.update_genre_use_case)),
) -> Genre:
    """
    Update a genre.

    Omitting categories_ids keeps the current categories; an empty list
    removes them all.

    Raises:
        HTTPException: 404 if the genre is not found, 422 if the name is empty
            or a category id does not exist
    """
    try:
        output = await use_case.update_genre(
            genre_id,
            name=request.name,
            is_active=request.is_active,
            categories_ids=request.categories_ids,
        )
        return Genre.model_validate(output)
    except CatalogError:
        raise
    except DomainError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.error("failed_to_update_genre", genre_id=str(genre_id), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_genre(
    genre_id: UUID,
    use_case: DeleteGenreUseCase = Depends(inject_use_case(container.delete_genre_use_case)),
) -> None:
    """
    Delete a genre and its category relations.

    Raises:
        HTTPException: 404 if the genre is not found
    """
    try:
        await use_case.delete_genre(genre_id)
    except CatalogError:
        raise
    except Exception as e:
        logger.error("failed_to_delete_genre", genre_id=str(genre_id), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
