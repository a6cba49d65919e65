"""Update genre use case."""

from collections.abc import Sequence
from uuid import UUID

import structlog

from catalog.application.common.unit_of_work import UnitOfWork
from catalog.application.genres.protocols.genre_repository import GenreRepositoryProtocol
from catalog.application.genres.services.related_categories_service import (
    RelatedCategoriesService,
)
from catalog.application.genres.use_cases.dtos import GenreOutput
from catalog.domain.common.value_objects.ids import GenreId

logger = structlog.get_logger(__name__)


class UpdateGenreUseCase:
    """Use case for updating genres."""

    def __init__(
        self,
        genre_repository: GenreRepositoryProtocol,
        related_categories_service: RelatedCategoriesService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.genre_repository = genre_repository
        self.related_categories_service = related_categories_service
        self.unit_of_work = unit_of_work

    async def update_genre(
        self,
        genre_id: UUID,
        name: str,
        is_active: bool | None = None,
        categories_ids: Sequence[UUID] | None = None,
    ) -> GenreOutput:
        """
        Update a genre and, optionally, replace its categories.

        Args:
            genre_id: ID of the genre to update
            name: New name
            is_active: New activation flag; None keeps the current one
            categories_ids: Replacement category ids; None leaves the current
                categories untouched, an empty sequence removes them all

        Returns:
            The updated genre

        Raises:
            GenreNotFoundError: If genre is not found
            EntityValidationError: If the name is empty
            RelatedCategoriesNotFoundError: If any category id does not exist;
                nothing is persisted in that case
        """
        async with self.unit_of_work:
            genre = await self.genre_repository.get(GenreId(genre_id))
            genre.update(name)

            if is_active is not None:
                if is_active:
                    genre.activate()
                else:
                    genre.deactivate()

            if categories_ids is not None:
                category_ids = await self.related_categories_service.resolve_category_ids(
                    categories_ids
                )
                genre.remove_all_categories()
                for category_id in category_ids:
                    genre.add_category(category_id)

            await self.genre_repository.update(genre)
            await self.unit_of_work.commit()

        logger.info(
            "updated_genre",
            genre_id=str(genre.id),
            categories_replaced=categories_ids is not None,
        )
        return GenreOutput.from_genre(genre)
