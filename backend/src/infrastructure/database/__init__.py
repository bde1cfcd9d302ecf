"""Database infrastructure module."""

from .session import (
    Base,
    close_db,
    create_engine,
    create_session_factory,
    engine,
    get_session,
    init_db,
    session_factory,
)
from .models import KeyValueModel

__all__ = [
    "Base",
    "close_db",
    "create_engine",
    "create_session_factory",
    "engine",
    "get_session",
    "init_db",
    "session_factory",
    "KeyValueModel",
]
