"""Catalog source reading listings from a JSON document."""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

from domain.entities import Property
from domain.repositories import ICatalogSource
from infrastructure.config import get_logger
from .property_mapper import property_from_dict


class JSONCatalogSource(ICatalogSource):
    """
    Concrete implementation of ICatalogSource backed by a JSON file.
    
    The document holds two arrays, ``properties`` and ``off_market``. It is
    read once per ``refresh()`` and served from memory until the next one, so
    every caller sees the same immutable snapshot.
    """
    
    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.logger = get_logger(self.__class__.__name__)
        self._regular: tuple[Property, ...] = ()
        self._off_market: tuple[Property, ...] = ()
        self._loaded = False
        self._lock = asyncio.Lock()
    
    async def refresh(self) -> None:
        """Re-read the document, replacing the current snapshot."""
        async with self._lock:
            document = await asyncio.to_thread(self._read_document)
            self._regular = self._parse_records(document.get("properties"), "properties")
            self._off_market = self._parse_records(document.get("off_market"), "off_market")
            self._loaded = True
            self.logger.info(
                "Catalog loaded",
                extra={
                    "path": str(self.path),
                    "regular": len(self._regular),
                    "off_market": len(self._off_market),
                },
            )
    
    async def list_properties(self, off_market: bool = False) -> list[Property]:
        """List regular listings, or the off-market collection."""
        await self._ensure_loaded()
        return list(self._off_market if off_market else self._regular)
    
    async def get_property(self, property_id: str) -> Optional[Property]:
        """Look up one property across both collections."""
        await self._ensure_loaded()
        for prop in (*self._regular, *self._off_market):
            if prop.id == property_id:
                return prop
        return None
    
    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            await self.refresh()
    
    def _read_document(self) -> dict[str, Any]:
        try:
            with self.path.open(encoding="utf-8") as fh:
                document = json.load(fh)
        except FileNotFoundError:
            self.logger.error("Catalog file not found", extra={"path": str(self.path)})
            return {}
        except (OSError, json.JSONDecodeError) as e:
            self.logger.error(
                f"Could not read catalog: {e}",
                extra={"path": str(self.path)},
            )
            return {}
        
        if isinstance(document, list):
            return {"properties": document}
        if not isinstance(document, dict):
            self.logger.error("Catalog document is not an object", extra={"path": str(self.path)})
            return {}
        return document
    
    def _parse_records(self, records: Any, collection: str) -> tuple[Property, ...]:
        if records is None:
            return ()
        if not isinstance(records, list):
            self.logger.warning(f"Catalog collection {collection!r} is not a list")
            return ()
        
        parsed: list[Property] = []
        seen: set[str] = set()
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                self.logger.warning(f"Skipping non-object record #{index} in {collection}")
                continue
            try:
                prop = property_from_dict(record)
            except ValueError as e:
                self.logger.warning(
                    f"Skipping record #{index} in {collection}: {e}",
                    extra={"property_id": record.get("id")},
                )
                continue
            if prop.id in seen:
                self.logger.warning(
                    f"Skipping duplicate id in {collection}",
                    extra={"property_id": prop.id},
                )
                continue
            seen.add(prop.id)
            parsed.append(prop)
        return tuple(parsed)
