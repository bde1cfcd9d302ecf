"""Domain Entities - Objects with identity."""

from .property import Property, Agent, PropertyMedia, MediaType

__all__ = ["Property", "Agent", "PropertyMedia", "MediaType"]
