"""Pydantic schemas for request/response validation."""

from .health_schemas import HealthResponse
from .property_schemas import (
    FavoriteStatusResponse,
    FavoritesResponse,
    PropertyListResponse,
    PropertyResponse,
)

__all__ = [
    "HealthResponse",
    "FavoriteStatusResponse",
    "FavoritesResponse",
    "PropertyListResponse",
    "PropertyResponse",
]
