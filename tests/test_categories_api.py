"""Tests for category API endpoints."""

from uuid import uuid4

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import create_test_category

CATEGORIES_URL = "/api/v1/categories"


class TestCreateCategory:
    """Test suite for POST /categories endpoint."""

    @pytest.mark.asyncio
    async def test_create_category_success(self, client: AsyncClient) -> None:
        response = await client.post(
            CATEGORIES_URL, json={"name": "Movies", "description": "Feature films"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Movies"
        assert data["description"] == "Feature films"
        assert data["is_active"] is True
        assert "id" in data
        assert "created_at" in data

        fetched = await client.get(f"{CATEGORIES_URL}/{data['id']}")
        assert fetched.status_code == status.HTTP_200_OK
        assert fetched.json()["name"] == "Movies"

    @pytest.mark.asyncio
    async def test_create_category_with_short_name(self, client: AsyncClient) -> None:
        response = await client.post(CATEGORIES_URL, json={"name": "ab"})

        assert response.status_code == 422
        assert response.json()["detail"] == "Name should be at least 3 characters long"


class TestGetCategory:
    """Test suite for GET /categories/{id} endpoint."""

    @pytest.mark.asyncio
    async def test_get_unknown_category(self, client: AsyncClient) -> None:
        category_id = uuid4()

        response = await client.get(f"{CATEGORIES_URL}/{category_id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == f"Category '{category_id}' not found."


class TestUpdateCategory:
    """Test suite for PUT /categories/{id} endpoint."""

    @pytest.mark.asyncio
    async def test_partial_update(self, client: AsyncClient, db_session: AsyncSession) -> None:
        category = await create_test_category(db_session, name="Movies", description="Films")

        response = await client.put(
            f"{CATEGORIES_URL}/{category.id}", json={"name": "Cinema", "is_active": False}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Cinema"
        assert data["description"] == "Films"
        assert data["is_active"] is False

    @pytest.mark.asyncio
    async def test_update_unknown_category(self, client: AsyncClient) -> None:
        response = await client.put(f"{CATEGORIES_URL}/{uuid4()}", json={"name": "Cinema"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteCategory:
    """Test suite for DELETE /categories/{id} endpoint."""

    @pytest.mark.asyncio
    async def test_delete_category(self, client: AsyncClient, db_session: AsyncSession) -> None:
        category = await create_test_category(db_session, name="Movies")

        response = await client.delete(f"{CATEGORIES_URL}/{category.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        fetched = await client.get(f"{CATEGORIES_URL}/{category.id}")
        assert fetched.status_code == status.HTTP_404_NOT_FOUND


class TestListCategories:
    """Test suite for GET /categories endpoint."""

    @pytest.mark.asyncio
    async def test_list_with_pagination_and_sort(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        for name in ["Anime", "Movies", "Series"]:
            await create_test_category(db_session, name=name)

        response = await client.get(
            CATEGORIES_URL, params={"page": 1, "per_page": 2, "sort": "name", "dir": "desc"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["page"] == 1
        assert data["per_page"] == 2
        assert data["total"] == 3
        assert [item["name"] for item in data["items"]] == ["Series", "Movies"]

    @pytest.mark.asyncio
    async def test_list_rejects_invalid_page(self, client: AsyncClient) -> None:
        response = await client.get(CATEGORIES_URL, params={"page": 0})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_list_uses_configured_default_page_size(self, client: AsyncClient) -> None:
        response = await client.get(CATEGORIES_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["per_page"] == 15
