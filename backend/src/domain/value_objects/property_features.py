"""Physical features of a property."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PropertyFeatures:
    """
    Immutable value object with a property's rooms and amenities.
    
    Room counts are optional because catalog records do not always carry
    them; a missing count never satisfies a bedroom/bathroom bound.
    """

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

    def __post_init__(self) -> None:
        """Validate room counts."""
        for name in ("bedrooms", "bathrooms", "parking_spaces"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} cannot be negative")
