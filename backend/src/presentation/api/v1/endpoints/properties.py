"""Property search endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from application.use_cases import BrowsePropertiesUseCase
from domain.value_objects import FilterCriteria
from presentation.api.v1.dependencies import get_browse_use_case, get_filter_criteria
from presentation.schemas import PropertyListResponse, PropertyResponse
from infrastructure.config import get_logger, get_settings

router = APIRouter(prefix="/properties", tags=["properties"])
logger = get_logger(__name__)


@router.get("", response_model=PropertyListResponse)
async def search_properties(
    off_market: bool = Query(False, description="Search the off-market collection"),
    criteria: FilterCriteria = Depends(get_filter_criteria),
    use_case: BrowsePropertiesUseCase = Depends(get_browse_use_case),
) -> PropertyListResponse:
    """Filter listings by the given criteria, keeping catalog order."""
    results = await use_case.search(criteria, off_market=off_market)
    return PropertyListResponse(
        count=len(results),
        active_filter_count=use_case.active_filter_count(criteria),
        properties=[
            PropertyResponse.from_entity(prop, use_case.is_favorite(prop.id))
            for prop in results
        ],
    )


@router.get("/featured", response_model=list[PropertyResponse])
async def featured_properties(
    use_case: BrowsePropertiesUseCase = Depends(get_browse_use_case),
) -> list[PropertyResponse]:
    """Premium listings for the home screen."""
    featured = await use_case.featured(get_settings().featured_limit)
    return [
        PropertyResponse.from_entity(prop, use_case.is_favorite(prop.id))
        for prop in featured
    ]


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str,
    use_case: BrowsePropertiesUseCase = Depends(get_browse_use_case),
) -> PropertyResponse:
    """Get a single property from the whole catalog."""
    prop = await use_case.get_property(property_id)
    if prop is None:
        logger.info("Property not found", extra={"property_id": property_id})
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Property {property_id} not found",
        )
    return PropertyResponse.from_entity(prop, use_case.is_favorite(prop.id))
