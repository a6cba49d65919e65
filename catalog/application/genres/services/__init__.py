"""Application services for the genre context."""

from .related_categories_service import RelatedCategoriesService

__all__ = ["RelatedCategoriesService"]
