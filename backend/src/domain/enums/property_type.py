"""Property types for real estate classification."""

from enum import Enum


class PropertyType(str, Enum):
    """Types of properties available in the catalog."""

    HOUSE = "house"
    APARTMENT = "apartment"
    TOWNHOUSE = "townhouse"
    LAND = "land"
    RURAL = "rural"
    COMMERCIAL = "commercial"

    def __str__(self) -> str:
        return self.value
