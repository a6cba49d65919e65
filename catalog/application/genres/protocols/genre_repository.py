"""Protocol for Genre repository."""

from typing import Protocol

from catalog.application.common.pagination import SearchInput, SearchOutput
from catalog.domain.common.value_objects.ids import GenreId
from catalog.domain.genres.entities.genre import Genre


class GenreRepositoryProtocol(Protocol):
    """
    Protocol for Genre repository operations.

    Implementations keep the genre to category relation in sync with the
    genre's category ids on insert, update and delete, and hydrate it on
    every read.
    """

    async def insert(self, genre: Genre) -> None:
        """
        Stage a new genre and one relation per category id.

        Args:
            genre: The genre to insert
        """
        ...

    async def get(self, genre_id: GenreId) -> Genre:
        """
        Load a genre with its category ids.

        Args:
            genre_id: The genre ID

        Returns:
            The genre entity

        Raises:
            GenreNotFoundError: If no genre has this id
        """
        ...

    async def update(self, genre: Genre) -> None:
        """
        Persist scalar fields and replace the stored relations with the
        genre's current category ids.

        Raises:
            GenreNotFoundError: If the genre no longer exists
        """
        ...

    async def delete(self, genre: Genre) -> None:
        """Remove a genre together with its relations."""
        ...

    async def search(self, search_input: SearchInput) -> SearchOutput[Genre]:
        """
        Filter, order and paginate genres, each hydrated with its category ids.

        Args:
            search_input: Page, page size, name filter and ordering

        Returns:
            The requested page and the total number of matches
        """
        ...
