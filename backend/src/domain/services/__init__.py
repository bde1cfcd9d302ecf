"""Domain Services - Stateless operations over domain objects."""

from .property_filter import (
    PREDICATES,
    count_active_filters,
    filter_properties,
    matches,
    select_by_ids,
)

__all__ = [
    "PREDICATES",
    "count_active_filters",
    "filter_properties",
    "matches",
    "select_by_ids",
]
