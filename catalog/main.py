"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog.config import Settings, configure_logging, get_settings
from catalog.database import create_schema, dispose_engine, get_engine, initialize_database
from catalog.domain.common import DomainError
from catalog.exceptions import CatalogError
from catalog.infrastructure.categories.routers.categories import router as categories_router
from catalog.infrastructure.genres.routers.genres import router as genres_router

logger = structlog.get_logger(__name__)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Translate application errors to their HTTP status code."""
    logger.info(
        "catalog_error",
        path=request.url.path,
        status_code=exc.status_code,
        message=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain validation errors raised outside the routers."""
    logger.info("domain_error", path=request.url.path, message=str(exc))
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the catalog API application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.ENVIRONMENT)
        initialize_database(settings)
        if settings.CREATE_SCHEMA_ON_STARTUP:
            await create_schema(get_engine())
        logger.info("application_started", environment=settings.ENVIRONMENT)
        try:
            yield
        finally:
            await dispose_engine()
            logger.info("application_stopped")

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    app.state.settings = settings

    app.add_exception_handler(CatalogError, catalog_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]

    app.include_router(categories_router, prefix=settings.API_V1_PREFIX)
    app.include_router(genres_router, prefix=settings.API_V1_PREFIX)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
