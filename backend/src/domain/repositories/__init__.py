"""Domain Repository Interfaces - Abstract definitions."""

from .catalog_source import ICatalogSource
from .key_value_storage import IKeyValueStorage

__all__ = ["ICatalogSource", "IKeyValueStorage"]
