"""Pytest configuration and fixtures."""

import uuid
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from catalog import models
from catalog.config import Settings
from catalog.database import Base, build_engine, build_session_factory, get_db
from catalog.main import create_app

# Test database URL (in-memory SQLite, shared by all sessions through StaticPool)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    test_engine = build_engine(TEST_DATABASE_URL)
    async with test_engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    try:
        yield test_engine
    finally:
        await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    session_factory = build_session_factory(engine)
    async with session_factory() as session:
        yield session


@asynccontextmanager
async def app_client(engine: AsyncEngine, settings: Settings) -> AsyncIterator[AsyncClient]:
    """HTTP client for an app built from settings; each request gets its own session."""
    app = create_app(settings)
    session_factory = build_session_factory(engine)

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """Create an HTTP client whose requests each get their own session."""
    settings = Settings(ENVIRONMENT="test", DATABASE_URL=TEST_DATABASE_URL)
    async with app_client(engine, settings) as test_client:
        yield test_client


async def create_test_category(
    db_session: AsyncSession,
    name: str = "Movies",
    description: str = "",
    is_active: bool = True,
    created_at: datetime | None = None,
) -> models.Category:
    """Insert a category row and commit it."""
    category = models.Category(
        id=uuid.uuid4(),
        name=name,
        description=description,
        is_active=is_active,
        created_at=created_at or datetime.now(UTC),
    )
    db_session.add(category)
    await db_session.commit()
    return category


async def create_test_genre(
    db_session: AsyncSession,
    name: str = "Action",
    is_active: bool = True,
    categories: list[models.Category] | None = None,
    created_at: datetime | None = None,
) -> models.Genre:
    """Insert a genre row with its relation rows and commit them."""
    genre = models.Genre(
        id=uuid.uuid4(),
        name=name,
        is_active=is_active,
        created_at=created_at or datetime.now(UTC),
    )
    db_session.add(genre)
    await db_session.flush()
    for category in categories or []:
        db_session.add(models.GenresCategories(genre_id=genre.id, category_id=category.id))
    await db_session.commit()
    return genre


def minutes_ago(minutes: int) -> datetime:
    return datetime.now(UTC) - timedelta(minutes=minutes)
