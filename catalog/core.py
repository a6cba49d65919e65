from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import AsyncSession

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
from catalog.application.genres.services.related_categories_service import (
    RelatedCategoriesService,
)
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
from catalog.infrastructure.categories.repositories.category_repository import (
    CategoryRepository,
)
from catalog.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from catalog.infrastructure.genres.repositories.genre_repository import GenreRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Request-scoped session, bound when a container is created for a request
    db = providers.Dependency(instance_of=AsyncSession)

    # Repositories
    category_repository = providers.Factory(CategoryRepository, db=db)
    genre_repository = providers.Factory(GenreRepository, db=db)
    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Application services
    related_categories_service = providers.Factory(
        RelatedCategoriesService,
        category_repository=category_repository,
    )

    # Category use cases
    create_category_use_case = providers.Factory(
        CreateCategoryUseCase,
        category_repository=category_repository,
        unit_of_work=unit_of_work,
    )
    get_category_use_case = providers.Factory(
        GetCategoryUseCase,
        category_repository=category_repository,
    )
    update_category_use_case = providers.Factory(
        UpdateCategoryUseCase,
        category_repository=category_repository,
        unit_of_work=unit_of_work,
    )
    delete_category_use_case = providers.Factory(
        DeleteCategoryUseCase,
        category_repository=category_repository,
        unit_of_work=unit_of_work,
    )
    list_categories_use_case = providers.Factory(
        ListCategoriesUseCase,
        category_repository=category_repository,
    )

    # Genre use cases
    create_genre_use_case = providers.Factory(
        CreateGenreUseCase,
        genre_repository=genre_repository,
        related_categories_service=related_categories_service,
        unit_of_work=unit_of_work,
    )
    get_genre_use_case = providers.Factory(
        GetGenreUseCase,
        genre_repository=genre_repository,
    )
    update_genre_use_case = providers.Factory(
        UpdateGenreUseCase,
        genre_repository=genre_repository,
        related_categories_service=related_categories_service,
        unit_of_work=unit_of_work,
    )
    delete_genre_use_case = providers.Factory(
        DeleteGenreUseCase,
        genre_repository=genre_repository,
        unit_of_work=unit_of_work,
    )
    list_genres_use_case = providers.Factory(
        ListGenresUseCase,
        genre_repository=genre_repository,
        category_repository=category_repository,
    )


# Provider registry used to name providers; request containers are built per session.
container = Container()
