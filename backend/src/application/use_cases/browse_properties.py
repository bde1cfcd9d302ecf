"""Use case exposing property search and favorites to the view layer."""

from typing import Iterable, Optional

from application.services import DerivedViewComposer, FavoritesStore
from domain.entities import Property
from domain.repositories import ICatalogSource
from domain.value_objects import FilterCriteria
from infrastructure.config import get_logger


class BrowsePropertiesUseCase:
    """
    Search the catalog and manage favorites.
    
    Filtered results, favorite properties and the active filter count all
    come from one DerivedViewComposer bound to the favorites store. Each
    call hands the freshly fetched catalog and the caller's criteria to the
    composer and reads the view back without awaiting in between, so
    concurrent requests never see each other's inputs.
    """
    
    def __init__(
        self,
        catalog_source: ICatalogSource,
        favorites_store: FavoritesStore,
        views: Optional[DerivedViewComposer] = None,
    ):
        self.catalog_source = catalog_source
        self.favorites = favorites_store
        self.views = views or DerivedViewComposer(favorites_store)
        self.logger = get_logger(self.__class__.__name__)
    
    async def filter(self, criteria: FilterCriteria) -> list[Property]:
        """Filter the whole catalog, regular listings first."""
        catalog = await self.catalog_source.list_all_properties()
        return self._filtered(catalog, criteria)
    
    async def search(
        self,
        criteria: FilterCriteria,
        off_market: bool = False,
    ) -> list[Property]:
        """
        Filter the regular listings, or the off-market collection.
        
        Args:
            criteria: Compound filter
            off_market: Search the off-market collection instead
            
        Returns:
            Matching properties in catalog order
        """
        catalog = await self.catalog_source.list_properties(off_market=off_market)
        results = self._filtered(catalog, criteria)
        self.logger.info(
            f"Search matched {len(results)} of {len(catalog)} properties",
            extra={"criteria": str(criteria), "off_market": off_market},
        )
        return results
    
    def active_filter_count(self, criteria: FilterCriteria) -> int:
        self.views.set_criteria(criteria)
        return self.views.active_filter_count
    
    def toggle_favorite(self, property_id: str) -> bool:
        """Toggle a favorite and return whether it is now favorited."""
        is_favorite = self.favorites.toggle(property_id)
        self.logger.info(
            "Favorite toggled",
            extra={"property_id": property_id, "is_favorite": is_favorite},
        )
        return is_favorite
    
    def add_favorite(self, property_id: str) -> bool:
        self.favorites.add(property_id)
        return self.favorites.is_favorite(property_id)
    
    def remove_favorite(self, property_id: str) -> bool:
        self.favorites.remove(property_id)
        return self.favorites.is_favorite(property_id)
    
    def is_favorite(self, property_id: str) -> bool:
        return self.favorites.is_favorite(property_id)
    
    def favorite_ids(self) -> tuple[str, ...]:
        return self.favorites.favorites
    
    def favorite_count(self) -> int:
        """Number of favorite ids, including ids missing from the catalog."""
        return self.views.favorite_count
    
    def favorite_properties_in(self, catalog: Optional[Iterable[Property]]) -> list[Property]:
        """Favorited properties of ``catalog``, in catalog order."""
        self.views.set_catalog(catalog)
        return list(self.views.favorite_properties)
    
    async def favorite_properties(self) -> list[Property]:
        """Favorited properties across the whole catalog."""
        catalog = await self.catalog_source.list_all_properties()
        return self.favorite_properties_in(catalog)
    
    async def get_property(self, property_id: str) -> Optional[Property]:
        return await self.catalog_source.get_property(property_id)
    
    async def featured(self, limit: int = 3) -> list[Property]:
        return await self.catalog_source.list_featured(limit)
    
    def close(self) -> None:
        """Detach the views from the favorites store."""
        self.views.close()
    
    def _filtered(self, catalog: list[Property], criteria: FilterCriteria) -> list[Property]:
        self.views.set_catalog(catalog)
        self.views.set_criteria(criteria)
        return list(self.views.filtered)
