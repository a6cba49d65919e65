"""Tests for application wiring."""

import pytest
from dependency_injector import providers
from httpx import AsyncClient

from catalog.core import container
from catalog.infrastructure.common.di import inject_use_case


@pytest.mark.asyncio
async def test_health_endpoint(client: AsyncClient) -> None:
    """Test health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_inject_use_case_rejects_unknown_provider() -> None:
    """Test that only providers declared on the container can be injected."""
    with pytest.raises(ValueError, match="not registered"):
        inject_use_case(providers.Factory(object))


def test_inject_use_case_accepts_container_provider() -> None:
    assert callable(inject_use_case(container.list_genres_use_case))
