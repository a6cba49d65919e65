"""Application layer building blocks shared by all use cases."""

from .pagination import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    PaginatedListOutput,
    SearchInput,
    SearchOrder,
    SearchOutput,
)
from .unit_of_work import UnitOfWork

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "PaginatedListOutput",
    "SearchInput",
    "SearchOrder",
    "SearchOutput",
    "UnitOfWork",
]
