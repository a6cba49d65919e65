"""Category bounded context."""

from .entities import Category

__all__ = ["Category"]
