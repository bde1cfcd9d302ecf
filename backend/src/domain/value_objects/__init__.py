"""Domain Value Objects - Immutable objects without identity."""

from .location import Location
from .property_features import PropertyFeatures
from .price import Price
from .filter_criteria import FilterCriteria

__all__ = ["Location", "PropertyFeatures", "Price", "FilterCriteria"]
