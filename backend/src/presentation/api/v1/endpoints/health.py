"""Health check endpoint."""

from fastapi import APIRouter, Depends

from application.services import FavoritesStore
from presentation.api.v1.dependencies import get_favorites_store
from presentation.schemas import HealthResponse
from infrastructure.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    favorites_store: FavoritesStore = Depends(get_favorites_store),
) -> HealthResponse:
    """
    Health check endpoint.
    
    Returns service status, version and whether favorites are loaded.
    """
    settings = get_settings()
    
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        favorites_ready=favorites_store.is_ready,
    )
