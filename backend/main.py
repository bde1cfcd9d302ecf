"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from application.services import FavoritesStore
from application.use_cases import BrowsePropertiesUseCase
from domain.repositories import ICatalogSource
from infrastructure.catalog import JSONCatalogSource
from infrastructure.config import get_logger, get_settings, setup_logger
from infrastructure.database import close_db, init_db, session_factory
from infrastructure.database.repositories import SQLAlchemyKeyValueStorage
from presentation.api.v1.endpoints import favorites, health, properties

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()

    # Setup logging
    setup_logger(
        name="haus",
        level=settings.log_level,
        log_format=settings.log_format,
    )

    # Components passed to create_app() are used as-is
    owns_database = False
    if getattr(app.state, "favorites_store", None) is None:
        await init_db()
        owns_database = True
        app.state.favorites_store = FavoritesStore(
            storage=SQLAlchemyKeyValueStorage(session_factory),
            storage_key=settings.favorites_storage_key,
            max_write_attempts=settings.favorites_write_attempts,
            retry_delay=settings.favorites_retry_delay,
        )
    if getattr(app.state, "catalog_source", None) is None:
        app.state.catalog_source = JSONCatalogSource(settings.catalog_path)

    await app.state.favorites_store.initialize()
    app.state.browse_use_case = BrowsePropertiesUseCase(
        catalog_source=app.state.catalog_source,
        favorites_store=app.state.favorites_store,
    )

    yield

    # Shutdown
    app.state.browse_use_case.close()
    if not await app.state.favorites_store.flush():
        logger.warning("Favorites were not fully persisted before shutdown")
    if owns_database:
        await close_db()


def create_app(
    catalog_source: Optional[ICatalogSource] = None,
    favorites_store: Optional[FavoritesStore] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        catalog_source: Catalog to serve instead of the configured JSON file
        favorites_store: Favorites store to use instead of the database-backed one

    Returns:
        Configured FastAPI app
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.catalog_source = catalog_source
    app.state.favorites_store = favorites_store

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router, prefix=settings.api_v1_prefix)
    app.include_router(properties.router, prefix=settings.api_v1_prefix)
    app.include_router(favorites.router, prefix=settings.api_v1_prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )
