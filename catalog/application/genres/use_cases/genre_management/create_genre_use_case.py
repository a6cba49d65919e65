"""Create genre use case."""

from collections.abc import Sequence
from uuid import UUID

import structlog

from catalog.application.common.unit_of_work import UnitOfWork
from catalog.application.genres.protocols.genre_repository import GenreRepositoryProtocol
from catalog.application.genres.services.related_categories_service import (
    RelatedCategoriesService,
)
from catalog.application.genres.use_cases.dtos import GenreOutput
from catalog.domain.genres.entities.genre import Genre

logger = structlog.get_logger(__name__)


class CreateGenreUseCase:
    """Use case for creating genres."""

    def __init__(
        self,
        genre_repository: GenreRepositoryProtocol,
        related_categories_service: RelatedCategoriesService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.genre_repository = genre_repository
        self.related_categories_service = related_categories_service
        self.unit_of_work = unit_of_work

    async def create_genre(
        self,
        name: str,
        is_active: bool = True,
        categories_ids: Sequence[UUID] | None = None,
    ) -> GenreOutput:
        """
        Create a new genre linked to existing categories.

        Every category id is checked before anything is persisted.

        Args:
            name: Genre name
            is_active: Whether the genre starts active
            categories_ids: Ids of the categories the genre belongs to (optional)

        Returns:
            The created genre

        Raises:
            EntityValidationError: If the name is empty
            RelatedCategoriesNotFoundError: If any category id does not exist
        """
        genre = Genre.create(name=name, is_active=is_active)

        async with self.unit_of_work:
            if categories_ids:
                for category_id in await self.related_categories_service.resolve_category_ids(
                    categories_ids
                ):
                    genre.add_category(category_id)

            await self.genre_repository.insert(genre)
            await self.unit_of_work.commit()

        logger.info(
            "created_genre",
            genre_id=str(genre.id),
            name=genre.name,
            categories_count=len(genre.categories),
        )
        return GenreOutput.from_genre(genre)
