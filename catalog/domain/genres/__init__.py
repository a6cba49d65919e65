"""Genre bounded context."""

from .entities import Genre

__all__ = ["Genre"]
