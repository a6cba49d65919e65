"""Validation of the categories a genre refers to."""

from collections.abc import Iterable
from uuid import UUID

import structlog

from catalog.application.categories.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from catalog.domain.common.value_objects.ids import CategoryId
from catalog.exceptions import RelatedCategoriesNotFoundError

logger = structlog.get_logger(__name__)


class RelatedCategoriesService:
    """Checks requested category ids against the category store."""

    def __init__(self, category_repository: CategoryRepositoryProtocol) -> None:
        self.category_repository = category_repository

    async def resolve_category_ids(self, category_ids: Iterable[UUID]) -> list[CategoryId]:
        """
        Turn requested ids into category ids, failing if any is unknown.

        Duplicates are dropped, request order is kept. An empty request
        returns an empty list without querying the store.

        Args:
            category_ids: Requested category ids

        Returns:
            The de-duplicated category ids, in request order

        Raises:
            RelatedCategoriesNotFoundError: If one or more ids do not exist,
                listing the missing ids in request order
        """
        requested = [CategoryId(category_id) for category_id in dict.fromkeys(category_ids)]
        if not requested:
            return []

        existing = set(await self.category_repository.get_ids_list_by_ids(requested))
        not_found = [category_id for category_id in requested if category_id not in existing]
        if not_found:
            logger.info(
                "related_categories_not_found",
                category_ids=[str(category_id) for category_id in not_found],
            )
            raise RelatedCategoriesNotFoundError(not_found)

        return requested
