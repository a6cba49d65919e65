"""Common infrastructure schemas."""

from catalog.infrastructure.common.schemas.response_wrappers import PaginatedResponse

__all__ = [
    "PaginatedResponse",
]
