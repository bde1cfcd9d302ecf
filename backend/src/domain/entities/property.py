"""Property entity representing a single catalog listing."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from domain.enums import ListingType, PropertyType
from domain.value_objects import Location, Price, PropertyFeatures


class MediaType(str, Enum):
    """Kind of media attached to a listing."""
    IMAGE = "image"
    VIDEO = "video"
    THREE_D = "3d"


@dataclass(frozen=True)
class PropertyMedia:
    """A photo, video or 3D tour attached to a listing."""

    id: str
    url: str
    type: MediaType = MediaType.IMAGE
    thumbnail: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Agent:
    """Listing agent contact details."""

    id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    agency: Optional[str] = None
    profile_image: Optional[str] = None


@dataclass(frozen=True)
class Property:
    """
    Entity representing a property listing as supplied by the catalog.
    
    Identity is the ``id``, unique within one catalog snapshot. Instances
    are immutable; a catalog refresh replaces them wholesale.
    """

    id: str
    type: PropertyType
    listing_type: ListingType
    title: str = ""
    description: str = ""
    location: Location = field(default_factory=Location)
    features: PropertyFeatures = field(default_factory=PropertyFeatures)
    price: Optional[Price] = None
    media: tuple[PropertyMedia, ...] = ()
    agent: Optional[Agent] = None
    is_new: bool = False
    is_exclusive: bool = False
    is_premium: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate identity."""
        if not self.id or not str(self.id).strip():
            raise ValueError("Property id cannot be empty")

    @property
    def is_off_market(self) -> bool:
        return self.listing_type is ListingType.OFF_MARKET

    def __str__(self) -> str:
        return f"Property(id={self.id}, type={self.type}, suburb={self.location.suburb})"
