"""Mapper for Category ORM ↔ Domain conversion."""

from catalog.domain.categories.entities.category import Category
from catalog.domain.common.value_objects.ids import CategoryId
from catalog.infrastructure.common.datetime_utils import as_utc
from catalog.models import Category as CategoryORM


class CategoryMapper:
    """Mapper for Category ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CategoryORM) -> Category:
        """Convert ORM model to domain entity."""
        return Category.create_with_id(
            id=CategoryId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description,
            is_active=orm_model.is_active,
            created_at=as_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: Category, orm_model: CategoryORM | None = None) -> CategoryORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            orm_model.is_active = domain_entity.is_active
            return orm_model

        # Create new
        return CategoryORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            description=domain_entity.description,
            is_active=domain_entity.is_active,
            created_at=domain_entity.created_at,
        )
