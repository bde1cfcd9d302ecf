"""Application use cases."""

from .browse_properties import BrowsePropertiesUseCase

__all__ = ["BrowsePropertiesUseCase"]
