"""Map raw catalog records onto domain entities."""

import math
from typing import Any, Optional

from domain.entities import Agent, Property, PropertyMedia, MediaType
from domain.enums import ListingType, PriceType, PropertyType, RentalPeriod
from domain.value_objects import Location, Price, PropertyFeatures


def property_from_dict(data: dict[str, Any]) -> Property:
    """
    Convert one catalog record into a Property.
    
    Accepts both camelCase keys, as served by the listings API, and
    snake_case keys. Optional fields that are missing, of the wrong shape or
    out of range become None, so a bad price or room count only fails its
    own filter instead of hiding the whole listing.

    Args:
        data: Raw record

    Returns:
        Property entity

    Raises:
        ValueError: If the id is missing or the type or listing type is unknown
    """
    property_id = data.get("id")
    if property_id is None or not str(property_id).strip():
        raise ValueError("Record has no id")
    
    return Property(
        id=str(property_id),
        type=PropertyType(data.get("type")),
        listing_type=ListingType(_get(data, "listingType", "listing_type")),
        title=_text(data.get("title")) or "",
        description=_text(data.get("description")) or "",
        location=_location(data.get("location")),
        features=_features(data.get("features")),
        price=_price(data.get("price")),
        media=_media(data.get("media")),
        agent=_agent(data.get("agent")),
        is_new=bool(_get(data, "isNew", "is_new")),
        is_exclusive=bool(_get(data, "isExclusive", "is_exclusive")),
        is_premium=bool(_get(data, "isPremium", "is_premium")),
        created_at=_text(_get(data, "createdAt", "created_at")),
        updated_at=_text(_get(data, "updatedAt", "updated_at")),
    )


def _get(data: dict, camel: str, snake: str) -> Any:
    value = data.get(camel)
    return data.get(snake) if value is None else value


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _count(value: Any) -> Optional[int]:
    count = _int(value)
    if count is None or count < 0:
        return None
    return count


def _float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # json accepts Infinity, NaN and 1e400
    return number if math.isfinite(number) else None


def _location(raw: Any) -> Location:
    if not isinstance(raw, dict):
        return Location()
    fields = dict(
        suburb=_text(raw.get("suburb")),
        state=_text(raw.get("state")),
        postcode=_text(raw.get("postcode")),
        address=_text(raw.get("address")),
    )
    try:
        return Location(
            latitude=_float(raw.get("latitude")),
            longitude=_float(raw.get("longitude")),
            **fields,
        )
    except ValueError:
        return Location(**fields)


def _features(raw: Any) -> PropertyFeatures:
    if not isinstance(raw, dict):
        return PropertyFeatures()
    return PropertyFeatures(
        bedrooms=_count(raw.get("bedrooms")),
        bathrooms=_count(raw.get("bathrooms")),
        parking_spaces=_count(_get(raw, "parkingSpaces", "parking_spaces")),
        land_size=_float(_get(raw, "landSize", "land_size")),
        building_size=_float(_get(raw, "buildingSize", "building_size")),
        year_built=_int(_get(raw, "yearBuilt", "year_built")),
        has_pool=_get(raw, "hasPool", "has_pool"),
        has_air_conditioning=_get(raw, "hasAirConditioning", "has_air_conditioning"),
        has_garden=_get(raw, "hasGarden", "has_garden"),
        has_balcony=_get(raw, "hasBalcony", "has_balcony"),
        energy_rating=_float(_get(raw, "energyRating", "energy_rating")),
    )


def _price(raw: Any) -> Optional[Price]:
    if not isinstance(raw, dict):
        return None
    try:
        price_type = PriceType(raw.get("type"))
    except ValueError:
        return None
    period = _get(raw, "rentalPeriod", "rental_period")
    try:
        return Price(
            type=price_type,
            amount=_float(raw.get("amount")),
            currency=_text(raw.get("currency")) or "AUD",
            min_amount=_float(_get(raw, "minAmount", "min_amount")),
            max_amount=_float(_get(raw, "maxAmount", "max_amount")),
            rental_period=RentalPeriod(period) if period in ("weekly", "monthly") else None,
        )
    except ValueError:
        # an unusable price fails only the price bounds
        return None


def _media(raw: Any) -> tuple[PropertyMedia, ...]:
    if not isinstance(raw, list):
        return ()
    items = []
    for entry in raw:
        if not isinstance(entry, dict) or not entry.get("url"):
            continue
        media_type = entry.get("type")
        items.append(
            PropertyMedia(
                id=str(entry.get("id") or entry["url"]),
                url=str(entry["url"]),
                type=MediaType(media_type) if media_type in ("image", "video", "3d") else MediaType.IMAGE,
                thumbnail=_text(entry.get("thumbnail")),
                description=_text(entry.get("description")),
            )
        )
    return tuple(items)


def _agent(raw: Any) -> Optional[Agent]:
    if not isinstance(raw, dict) or not raw.get("id"):
        return None
    return Agent(
        id=str(raw["id"]),
        name=_text(raw.get("name")) or "",
        phone=_text(raw.get("phone")),
        email=_text(raw.get("email")),
        agency=_text(raw.get("agency")),
        profile_image=_text(_get(raw, "profileImage", "profile_image")),
    )
