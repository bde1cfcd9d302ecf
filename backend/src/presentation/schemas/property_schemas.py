"""Property and favorites Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, Field

from domain.entities import Property
from domain.enums import ListingType, PriceType, PropertyType, RentalPeriod


class LocationSchema(BaseModel):
    """Property address."""
    
    suburb: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class FeaturesSchema(BaseModel):
    """Rooms and amenities."""
    
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    parking_spaces: Optional[int] = None
    land_size: Optional[float] = None
    building_size: Optional[float] = None
    year_built: Optional[int] = None
    has_pool: Optional[bool] = None
    has_air_conditioning: Optional[bool] = None
    has_garden: Optional[bool] = None
    has_balcony: Optional[bool] = None
    energy_rating: Optional[float] = None


class PriceSchema(BaseModel):
    """Asking price with its display label."""
    
    type: PriceType
    amount: Optional[float] = None
    currency: str = "AUD"
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    rental_period: Optional[RentalPeriod] = None
    display: str = Field(..., description="Label shown on listing cards")


class AgentSchema(BaseModel):
    """Listing agent."""
    
    id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    agency: Optional[str] = None
    profile_image: Optional[str] = None


class MediaSchema(BaseModel):
    """Listing media item."""
    
    id: str
    type: str
    url: str
    thumbnail: Optional[str] = None
    description: Optional[str] = None


class PropertyResponse(BaseModel):
    """Response schema for a single property."""
    
    id: str
    title: str
    description: str
    type: PropertyType
    listing_type: ListingType
    listing_label: str
    location: LocationSchema
    features: FeaturesSchema
    price: Optional[PriceSchema] = None
    media: list[MediaSchema] = Field(default_factory=list)
    agent: Optional[AgentSchema] = None
    is_new: bool = False
    is_exclusive: bool = False
    is_premium: bool = False
    is_favorite: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    
    @classmethod
    def from_entity(cls, prop: Property, is_favorite: bool = False) -> "PropertyResponse":
        """Build the response from a domain entity."""
        price = None
        if prop.price is not None:
            price = PriceSchema(
                type=prop.price.type,
                amount=prop.price.amount,
                currency=prop.price.currency,
                min_amount=prop.price.min_amount,
                max_amount=prop.price.max_amount,
                rental_period=prop.price.rental_period,
                display=str(prop.price),
            )
        agent = None
        if prop.agent is not None:
            agent = AgentSchema(
                id=prop.agent.id,
                name=prop.agent.name,
                phone=prop.agent.phone,
                email=prop.agent.email,
                agency=prop.agent.agency,
                profile_image=prop.agent.profile_image,
            )
        location = prop.location
        features = prop.features
        return cls(
            id=prop.id,
            title=prop.title,
            description=prop.description,
            type=prop.type,
            listing_type=prop.listing_type,
            listing_label=prop.listing_type.label,
            location=LocationSchema(
                suburb=location.suburb,
                state=location.state,
                postcode=location.postcode,
                address=location.address,
                latitude=location.latitude,
                longitude=location.longitude,
            ),
            features=FeaturesSchema(
                bedrooms=features.bedrooms,
                bathrooms=features.bathrooms,
                parking_spaces=features.parking_spaces,
                land_size=features.land_size,
                building_size=features.building_size,
                year_built=features.year_built,
                has_pool=features.has_pool,
                has_air_conditioning=features.has_air_conditioning,
                has_garden=features.has_garden,
                has_balcony=features.has_balcony,
                energy_rating=features.energy_rating,
            ),
            price=price,
            media=[
                MediaSchema(
                    id=m.id,
                    type=m.type.value,
                    url=m.url,
                    thumbnail=m.thumbnail,
                    description=m.description,
                )
                for m in prop.media
            ],
            agent=agent,
            is_new=prop.is_new,
            is_exclusive=prop.is_exclusive,
            is_premium=prop.is_premium,
            is_favorite=is_favorite,
            created_at=prop.created_at,
            updated_at=prop.updated_at,
        )


class PropertyListResponse(BaseModel):
    """Response schema for a filtered property list."""
    
    count: int = Field(..., description="Number of matching properties")
    active_filter_count: int = Field(..., description="Number of active criteria fields")
    properties: list[PropertyResponse]


class FavoriteStatusResponse(BaseModel):
    """Favorite state of one property after a query or mutation."""
    
    property_id: str
    is_favorite: bool
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "property_id": "prop-001",
                    "is_favorite": True
                }
            ]
        }
    }


class FavoritesResponse(BaseModel):
    """Response schema for the favorites view."""
    
    count: int = Field(..., description="Number of favorite ids, including ids missing from the catalog")
    ids: list[str]
    properties: list[PropertyResponse]
