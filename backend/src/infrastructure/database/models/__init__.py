"""SQLAlchemy ORM models."""

from .key_value_model import KeyValueModel

__all__ = ["KeyValueModel"]
