"""Delete genre use case."""

from uuid import UUID

import structlog

from catalog.application.common.unit_of_work import UnitOfWork
from catalog.application.genres.protocols.genre_repository import GenreRepositoryProtocol
from catalog.domain.common.value_objects.ids import GenreId

logger = structlog.get_logger(__name__)


class DeleteGenreUseCase:
    """Use case for deleting genres."""

    def __init__(
        self,
        genre_repository: GenreRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.genre_repository = genre_repository
        self.unit_of_work = unit_of_work

    async def delete_genre(self, genre_id: UUID) -> None:
        """
        Delete a genre and its category relations.

        Args:
            genre_id: ID of the genre to delete

        Raises:
            GenreNotFoundError: If genre is not found
        """
        async with self.unit_of_work:
            genre = await self.genre_repository.get(GenreId(genre_id))
            await self.genre_repository.delete(genre)
            await self.unit_of_work.commit()

        logger.info("deleted_genre", genre_id=str(genre_id))
