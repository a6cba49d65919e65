from collections.abc import Awaitable, Callable
from typing import TypeVar

from dependency_injector import providers
from dependency_injector.providers import Provider
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.config import Settings, get_settings
from catalog.core import Container, container
from catalog.database import DatabaseSession

T = TypeVar("T")


def _provider_name(provider: Provider[T]) -> str:
    for name, candidate in container.providers.items():
        if candidate is provider:
            return name
    raise ValueError(f"Provider {provider!r} is not registered in the container")


def request_container(db: AsyncSession) -> Container:
    """Create a container whose repositories share the given session."""
    return Container(db=providers.Object(db))


def inject_use_case(provider: Provider[T]) -> Callable[[AsyncSession], Awaitable[T]]:
    """
    Create a FastAPI dependency for a container provider.

    Each request gets its own container bound to the request-scoped
    database session, so concurrent requests never share a session.
    """
    provider_name = _provider_name(provider)

    async def dependency(db: DatabaseSession) -> T:
        return request_container(db).providers[provider_name]()

    return dependency


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with, falling back to the cached ones."""
    return getattr(request.app.state, "settings", None) or get_settings()
