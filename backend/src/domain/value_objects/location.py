"""Location value object describing where a property sits."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """
    Immutable value object representing a property's address.
    
    Attributes:
        suburb: Suburb name
        state: State or territory code (e.g. NSW)
        postcode: Postal code, kept as text to preserve leading zeros
        address: Street address
        latitude: Optional latitude in degrees
        longitude: Optional longitude in degrees
    """

    suburb: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate coordinates."""
        if self.latitude is not None and not -90 <= self.latitude <= 90:
            raise ValueError("Latitude must be between -90 and 90")
        if self.longitude is not None and not -180 <= self.longitude <= 180:
            raise ValueError("Longitude must be between -180 and 180")

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def __str__(self) -> str:
        parts = [part for part in (self.suburb, self.state, self.postcode) if part]
        if not parts:
            return self.address or ""
        head = ", ".join(parts[:2])
        return f"{head} {parts[2]}" if len(parts) > 2 else head
