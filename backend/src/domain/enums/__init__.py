"""Domain Enums - Constant values used across the domain."""

from .property_type import PropertyType
from .listing_type import ListingType
from .price_type import PriceType, RentalPeriod

__all__ = ["PropertyType", "ListingType", "PriceType", "RentalPeriod"]
