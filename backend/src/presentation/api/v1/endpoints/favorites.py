"""Favorites endpoints."""

from fastapi import APIRouter, Depends

from application.use_cases import BrowsePropertiesUseCase
from presentation.api.v1.dependencies import get_browse_use_case
from presentation.schemas import FavoriteStatusResponse, FavoritesResponse, PropertyResponse

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=FavoritesResponse)
async def list_favorites(
    use_case: BrowsePropertiesUseCase = Depends(get_browse_use_case),
) -> FavoritesResponse:
    """Favorited properties in catalog order, plus every stored id."""
    ids = use_case.favorite_ids()
    properties = await use_case.favorite_properties()
    return FavoritesResponse(
        count=use_case.favorite_count(),
        ids=list(ids),
        properties=[PropertyResponse.from_entity(prop, True) for prop in properties],
    )


@router.get("/{property_id}", response_model=FavoriteStatusResponse)
async def favorite_status(
    property_id: str,
    use_case: BrowsePropertiesUseCase = Depends(get_browse_use_case),
) -> FavoriteStatusResponse:
    """Whether a property is a favorite."""
    return FavoriteStatusResponse(
        property_id=property_id,
        is_favorite=use_case.is_favorite(property_id),
    )


@router.post("/{property_id}/toggle", response_model=FavoriteStatusResponse)
async def toggle_favorite(
    property_id: str,
    use_case: BrowsePropertiesUseCase = Depends(get_browse_use_case),
) -> FavoriteStatusResponse:
    """Toggle a favorite. Persistence completes in the background."""
    return FavoriteStatusResponse(
        property_id=property_id,
        is_favorite=use_case.toggle_favorite(property_id),
    )


@router.put("/{property_id}", response_model=FavoriteStatusResponse)
async def add_favorite(
    property_id: str,
    use_case: BrowsePropertiesUseCase = Depends(get_browse_use_case),
) -> FavoriteStatusResponse:
    """Mark a property as favorite; repeating the call is a no-op."""
    return FavoriteStatusResponse(
        property_id=property_id,
        is_favorite=use_case.add_favorite(property_id),
    )


@router.delete("/{property_id}", response_model=FavoriteStatusResponse)
async def remove_favorite(
    property_id: str,
    use_case: BrowsePropertiesUseCase = Depends(get_browse_use_case),
) -> FavoriteStatusResponse:
    """Unmark a favorite; removing a missing id is a no-op."""
    return FavoriteStatusResponse(
        property_id=property_id,
        is_favorite=use_case.remove_favorite(property_id),
    )
