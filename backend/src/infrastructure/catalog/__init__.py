"""Property catalog adapters."""

from .json_catalog_source import JSONCatalogSource
from .property_mapper import property_from_dict

__all__ = ["JSONCatalogSource", "property_from_dict"]
