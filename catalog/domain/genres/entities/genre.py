"""Genre entity grouping catalog content across categories."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from catalog.domain.common.entity import Entity
from catalog.domain.common.exceptions import EntityValidationError
from catalog.domain.common.value_objects.ids import CategoryId, GenreId


@dataclass(eq=False)
class Genre(Entity[GenreId]):
    """
    Genre aggregate.

    A genre references the categories it belongs to by id only. The
    category ids behave as a set: adding an id twice keeps a single
    entry, and enumeration follows insertion order.
    """

    # Identity
    id: GenreId

    # Content
    name: str

    # State
    is_active: bool

    # Timestamps
    created_at: datetime

    # Relations
    _categories: list[CategoryId] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._validate_name(self.name)

    @staticmethod
    def _validate_name(name: str) -> None:
        if name is None or not name.strip():
            raise EntityValidationError("Name should not be empty or null", field="name")

    # Query methods
    @property
    def categories(self) -> tuple[CategoryId, ...]:
        """Ids of the categories this genre belongs to."""
        return tuple(self._categories)

    def has_category(self, category_id: CategoryId) -> bool:
        return category_id in self._categories

    # Command methods
    def update(self, name: str) -> None:
        self._validate_name(name)
        self.name = name

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def add_category(self, category_id: CategoryId) -> None:
        if category_id not in self._categories:
            self._categories.append(category_id)

    def remove_category(self, category_id: CategoryId) -> None:
        """Remove a category id; ids the genre does not hold are ignored."""
        if category_id in self._categories:
            self._categories.remove(category_id)

    def remove_all_categories(self) -> None:
        self._categories.clear()

    # Factory methods
    @classmethod
    def create(
        cls,
        name: str,
        is_active: bool = True,
        categories: Iterable[CategoryId] = (),
    ) -> "Genre":
        """Factory for creating new genre."""
        genre = cls(
            id=GenreId.generate(),
            name=name,
            is_active=is_active,
            created_at=datetime.now(UTC),
        )
        for category_id in categories:
            genre.add_category(category_id)
        return genre

    @classmethod
    def create_with_id(
        cls,
        id: GenreId,
        name: str,
        is_active: bool,
        created_at: datetime,
        categories: Iterable[CategoryId] = (),
    ) -> "Genre":
        """Factory for reconstituting genre from persistence."""
        genre = cls(
            id=id,
            name=name,
            is_active=is_active,
            created_at=created_at,
        )
        for category_id in categories:
            genre.add_category(category_id)
        return genre
