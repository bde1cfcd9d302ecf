"""Application services - Stateful components shared by use cases."""

from .favorites_store import FavoritesStore, FavoritesState
from .view_composer import DerivedViewComposer, VIEW_DEPENDENCIES

__all__ = ["FavoritesStore", "FavoritesState", "DerivedViewComposer", "VIEW_DEPENDENCIES"]
