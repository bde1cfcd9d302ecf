"""FastAPI dependency injection setup."""

from typing import Optional
from fastapi import Depends, HTTPException, Query, Request, status

from application.services import FavoritesStore
from application.use_cases import BrowsePropertiesUseCase
from domain.enums import ListingType, PropertyType
from domain.repositories import ICatalogSource
from domain.value_objects import FilterCriteria


# Shared components are built once in the application lifespan
def get_catalog_source(request: Request) -> ICatalogSource:
    """Get catalog source dependency."""
    return request.app.state.catalog_source


def get_favorites_store(request: Request) -> FavoritesStore:
    """Get favorites store dependency."""
    return request.app.state.favorites_store


# Use case dependency
async def get_browse_use_case(
    request: Request,
    favorites_store: FavoritesStore = Depends(get_favorites_store),
) -> BrowsePropertiesUseCase:
    """Get the shared browse use case with favorites loaded."""
    await favorites_store.initialize()
    return request.app.state.browse_use_case


# Query parameters
def get_filter_criteria(
    search: str = Query("", max_length=200, description="Suburb, state, postcode or title text"),
    property_types: list[PropertyType] = Query(default=[]),
    listing_types: list[ListingType] = Query(default=[]),
    suburbs: list[str] = Query(default=[]),
    states: list[str] = Query(default=[]),
    min_bedrooms: Optional[int] = Query(None, ge=0),
    max_bedrooms: Optional[int] = Query(None, ge=0),
    min_bathrooms: Optional[int] = Query(None, ge=0),
    max_bathrooms: Optional[int] = Query(None, ge=0),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
) -> FilterCriteria:
    """Build filter criteria from query parameters."""
    try:
        return FilterCriteria(
            search=search,
            property_types=property_types,
            listing_types=listing_types,
            suburbs=suburbs,
            states=states,
            min_bedrooms=min_bedrooms,
            max_bedrooms=max_bedrooms,
            min_bathrooms=min_bathrooms,
            max_bathrooms=max_bathrooms,
            min_price=min_price,
            max_price=max_price,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
