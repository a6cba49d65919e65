"""Repository for Genre domain entity."""

from collections import defaultdict
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.common.pagination import SearchInput, SearchOutput
from catalog.domain.common.value_objects.ids import CategoryId, GenreId
from catalog.domain.genres.entities.genre import Genre
from catalog.exceptions import GenreNotFoundError
from catalog.infrastructure.common.search import load_page
from catalog.infrastructure.genres.mappers.genre_mapper import GenreMapper
from catalog.models import Genre as GenreORM
from catalog.models import GenresCategories as GenresCategoriesORM


class GenreRepository:
    """
    Repository for Genre domain entity.

    Relation rows in genres_categories are written and removed with core
    statements as a side effect of genre writes, and read back with one
    batched query per read.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = GenreMapper()

    async def _find_orm(self, genre_id: GenreId) -> GenreORM:
        stmt = select(GenreORM).where(GenreORM.id == genre_id.value)
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()
        if orm_model is None:
            raise GenreNotFoundError(genre_id)
        return orm_model

    async def _load_relations(self, genre_ids: Sequence[UUID]) -> dict[UUID, list[CategoryId]]:
        """
        Fetch the category ids of many genres in a single query.

        Returns:
            Map of genre id to its category ids; genres without relations are absent
        """
        if not genre_ids:
            return {}

        stmt = (
            select(GenresCategoriesORM.genre_id, GenresCategoriesORM.category_id)
            .where(GenresCategoriesORM.genre_id.in_(genre_ids))
            .order_by(GenresCategoriesORM.genre_id, GenresCategoriesORM.category_id)
        )
        relations: dict[UUID, list[CategoryId]] = defaultdict(list)
        for genre_id, category_id in (await self.db.execute(stmt)).all():
            relations[genre_id].append(CategoryId(category_id))
        return relations

    def _attach(self, orm_model: GenreORM, relations: dict[UUID, list[CategoryId]]) -> Genre:
        return self.mapper.to_domain(orm_model, relations.get(orm_model.id, []))

    async def _insert_relations(self, genre: Genre) -> None:
        rows = self.mapper.to_relation_rows(genre)
        if rows:
            await self.db.execute(insert(GenresCategoriesORM), rows)

    async def _delete_relations(self, genre_id: GenreId) -> None:
        await self.db.execute(
            delete(GenresCategoriesORM).where(GenresCategoriesORM.genre_id == genre_id.value)
        )

    async def insert(self, genre: Genre) -> None:
        self.db.add(self.mapper.to_orm(genre))
        await self.db.flush()
        await self._insert_relations(genre)

    async def get(self, genre_id: GenreId) -> Genre:
        """
        Get a genre with its category ids.

        Raises:
            GenreNotFoundError: If no genre has this id
        """
        orm_model = await self._find_orm(genre_id)
        relations = await self._load_relations([orm_model.id])
        return self._attach(orm_model, relations)

    async def update(self, genre: Genre) -> None:
        """Persist scalar fields, then replace all relation rows of the genre."""
        existing = await self._find_orm(genre.id)
        self.mapper.to_orm(genre, existing)
        await self.db.flush()

        await self._delete_relations(genre.id)
        await self._insert_relations(genre)

    async def delete(self, genre: Genre) -> None:
        orm_model = await self._find_orm(genre.id)
        await self._delete_relations(genre.id)
        await self.db.delete(orm_model)
        await self.db.flush()

    async def search(self, search_input: SearchInput) -> SearchOutput[Genre]:
        """
        Filter by name, order and paginate genres.

        The page is loaded first, then the relations of every genre on the
        page in one query, then each genre is attached to its category ids.

        Args:
            search_input: Page, page size, name filter and ordering

        Returns:
            SearchOutput with the page items and the total number of matches
        """
        rows, total = await load_page(self.db, GenreORM, search_input)
        relations = await self._load_relations([orm.id for orm in rows])
        return SearchOutput(
            current_page=search_input.page,
            per_page=search_input.per_page,
            total=total,
            items=[self._attach(orm, relations) for orm in rows],
        )
