"""Mapper for Genre ORM ↔ Domain conversion."""

from collections.abc import Iterable
from uuid import UUID

from catalog.domain.common.value_objects.ids import CategoryId, GenreId
from catalog.domain.genres.entities.genre import Genre
from catalog.infrastructure.common.datetime_utils import as_utc
from catalog.models import Genre as GenreORM


class GenreMapper:
    """Mapper for Genre ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: GenreORM, category_ids: Iterable[CategoryId] = ()) -> Genre:
        """Convert ORM model and its related category ids to a domain entity."""
        return Genre.create_with_id(
            id=GenreId(orm_model.id),
            name=orm_model.name,
            is_active=orm_model.is_active,
            created_at=as_utc(orm_model.created_at),
            categories=category_ids,
        )

    def to_orm(self, domain_entity: Genre, orm_model: GenreORM | None = None) -> GenreORM:
        """Convert domain entity to ORM model (scalar fields only)."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.is_active = domain_entity.is_active
            return orm_model

        # Create new
        return GenreORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            is_active=domain_entity.is_active,
            created_at=domain_entity.created_at,
        )

    def to_relation_rows(self, domain_entity: Genre) -> list[dict[str, UUID]]:
        """One genres_categories row per category id of the genre."""
        return [
            {"genre_id": domain_entity.id.value, "category_id": category_id.value}
            for category_id in domain_entity.categories
        ]
