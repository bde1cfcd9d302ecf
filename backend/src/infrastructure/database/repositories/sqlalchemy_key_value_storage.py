"""SQLAlchemy implementation of key-value storage."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.exceptions import StorageError
from domain.repositories import IKeyValueStorage
from infrastructure.config import get_logger
from infrastructure.database.models import KeyValueModel


class SQLAlchemyKeyValueStorage(IKeyValueStorage):
    """
    Concrete implementation of IKeyValueStorage backed by one table row per key.
    
    Each call opens its own session so the storage can outlive any request
    scope; ``set`` replaces the value inside a single transaction.
    """
    
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """Initialize storage with a session factory."""
        self.session_factory = session_factory
        self.logger = get_logger(self.__class__.__name__)
    
    async def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key."""
        try:
            async with self.session_factory() as session:
                stmt = select(KeyValueModel.value).where(KeyValueModel.key == key)
                result = await session.execute(stmt)
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read key {key!r}: {e}", key=key) from e
    
    async def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under a key."""
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    model = await session.get(KeyValueModel, key)
                    if model is None:
                        session.add(KeyValueModel(key=key, value=value))
                    else:
                        model.value = value
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write key {key!r}: {e}", key=key) from e
        self.logger.debug("Stored value", extra={"key": key, "size": len(value)})
