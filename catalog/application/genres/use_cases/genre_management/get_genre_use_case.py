"""Get genre use case."""

from uuid import UUID

from catalog.application.genres.protocols.genre_repository import GenreRepositoryProtocol
from catalog.application.genres.use_cases.dtos import GenreOutput
from catalog.domain.common.value_objects.ids import GenreId


class GetGenreUseCase:
    """Use case for reading a single genre."""

    def __init__(self, genre_repository: GenreRepositoryProtocol) -> None:
        self.genre_repository = genre_repository

    async def get_genre(self, genre_id: UUID) -> GenreOutput:
        """
        Get a genre with its category ids.

        Raises:
            GenreNotFoundError: If genre is not found
        """
        genre = await self.genre_repository.get(GenreId(genre_id))
        return GenreOutput.from_genre(genre)
