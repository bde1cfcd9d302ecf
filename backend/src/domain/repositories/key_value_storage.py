"""Key-value storage interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStorage(ABC):
    """
    Abstract interface for durable key-value storage.
    
    Values are opaque serialized strings. Concrete implementations live in
    the infrastructure layer and raise ``StorageError`` on failure.
    """
    
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.
        
        Args:
            key: Storage key
            
        Returns:
            Serialized value, or None if nothing is stored
        """
        pass
    
    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Replace the value stored under a key in a single write.
        
        Args:
            key: Storage key
            value: Serialized value
        """
        pass
