"""Lightweight storage adapters."""

from .memory_storage import InMemoryKeyValueStorage

__all__ = ["InMemoryKeyValueStorage"]
