"""Category entity for classifying catalog content."""

from dataclasses import dataclass
from datetime import UTC, datetime

from catalog.domain.common.entity import Entity
from catalog.domain.common.exceptions import EntityValidationError
from catalog.domain.common.value_objects.ids import CategoryId

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


@dataclass(eq=False)
class Category(Entity[CategoryId]):
    """
    Category aggregate.

    Invariants are checked on construction and after every update:
    the name is 3 to 255 characters long and the description is a
    (possibly empty) string of at most 10000 characters.
    """

    # Identity
    id: CategoryId

    # Content
    name: str
    description: str

    # State
    is_active: bool

    # Timestamps
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._validate()

    def _validate(self) -> None:
        if self.name is None or not self.name.strip():
            raise EntityValidationError("Name should not be empty or null", field="name")
        if len(self.name) < NAME_MIN_LENGTH:
            raise EntityValidationError(
                f"Name should be at least {NAME_MIN_LENGTH} characters long", field="name"
            )
        if len(self.name) > NAME_MAX_LENGTH:
            raise EntityValidationError(
                f"Name should be less or equal to {NAME_MAX_LENGTH} characters long",
                field="name",
            )
        if self.description is None:
            raise EntityValidationError("Description should not be null", field="description")
        if len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise EntityValidationError(
                f"Description should be less or equal to {DESCRIPTION_MAX_LENGTH} characters long",
                field="description",
            )

    # Command methods
    def update(self, name: str, description: str | None = None) -> None:
        """Rename the category; a None description keeps the current one."""
        previous = (self.name, self.description)
        self.name = name
        if description is not None:
            self.description = description
        try:
            self._validate()
        except EntityValidationError:
            self.name, self.description = previous
            raise

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    # Factory methods
    @classmethod
    def create(
        cls,
        name: str,
        description: str = "",
        is_active: bool = True,
    ) -> "Category":
        """Factory for creating new category."""
        return cls(
            id=CategoryId.generate(),
            name=name,
            description=description,
            is_active=is_active,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: CategoryId,
        name: str,
        description: str,
        is_active: bool,
        created_at: datetime,
    ) -> "Category":
        """Factory for reconstituting category from persistence."""
        return cls(
            id=id,
            name=name,
            description=description,
            is_active=is_active,
            created_at=created_at,
        )
