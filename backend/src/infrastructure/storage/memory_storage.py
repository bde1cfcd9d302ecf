"""In-memory implementation of key-value storage."""

from typing import Optional

from domain.repositories import IKeyValueStorage


class InMemoryKeyValueStorage(IKeyValueStorage):
    """Dict-backed storage for tests and ephemeral runs."""
    
    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})
    
    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)
    
    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
    
    def snapshot(self) -> dict[str, str]:
        """Copy of everything stored, for inspection."""
        return dict(self._data)
