"""Catalog source interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Property


class ICatalogSource(ABC):
    """
    Abstract interface for the property catalog.
    
    Each call returns an already-fetched, ordered snapshot. The core never
    mutates what it receives.
    """
    
    @abstractmethod
    async def list_properties(self, off_market: bool = False) -> list[Property]:
        """
        List regular listings, or the off-market collection.
        
        Args:
            off_market: Return the premium off-market collection instead
            
        Returns:
            Ordered list of properties
        """
        pass
    
    @abstractmethod
    async def get_property(self, property_id: str) -> Optional[Property]:
        """
        Look up one property across the whole catalog.
        
        Args:
            property_id: Property identifier
            
        Returns:
            Property if found, None otherwise
        """
        pass
    
    async def list_all_properties(self) -> list[Property]:
        """Regular listings followed by off-market listings."""
        regular = await self.list_properties()
        off_market = await self.list_properties(off_market=True)
        return [*regular, *off_market]
    
    async def list_featured(self, limit: int = 3) -> list[Property]:
        """First ``limit`` premium listings of the regular collection."""
        regular = await self.list_properties()
        return [p for p in regular if p.is_premium][:limit]
