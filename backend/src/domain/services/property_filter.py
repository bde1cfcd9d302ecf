"""
Filter predicate engine for the property catalog.

A property matches a ``FilterCriteria`` when every per-field predicate
holds (AND across groups); a set-valued criterion accepts any of its
values (OR within the group). Filtering is stable: the result keeps the
catalog's order.
"""

from typing import Callable, Iterable, Optional, Sequence

from domain.entities import Property
from domain.value_objects import FilterCriteria

Predicate = Callable[[Property, FilterCriteria], bool]


def matches_search(prop: Property, criteria: FilterCriteria) -> bool:
    """Case-insensitive substring match on suburb, state, postcode and title."""
    if not criteria.search:
        return True
    needle = criteria.search.lower()
    location = prop.location
    haystack = (
        getattr(location, "suburb", None),
        getattr(location, "state", None),
        getattr(location, "postcode", None),
        prop.title,
    )
    return any(needle in str(value).lower() for value in haystack if value)


def matches_property_type(prop: Property, criteria: FilterCriteria) -> bool:
    return not criteria.property_types or prop.type in criteria.property_types


def matches_listing_type(prop: Property, criteria: FilterCriteria) -> bool:
    return not criteria.listing_types or prop.listing_type in criteria.listing_types


def matches_suburb(prop: Property, criteria: FilterCriteria) -> bool:
    if not criteria.suburbs:
        return True
    return getattr(prop.location, "suburb", None) in criteria.suburbs


def matches_state(prop: Property, criteria: FilterCriteria) -> bool:
    if not criteria.states:
        return True
    return getattr(prop.location, "state", None) in criteria.states


def matches_bedrooms(prop: Property, criteria: FilterCriteria) -> bool:
    return _within(
        getattr(prop.features, "bedrooms", None),
        criteria.min_bedrooms,
        criteria.max_bedrooms,
    )


def matches_bathrooms(prop: Property, criteria: FilterCriteria) -> bool:
    return _within(
        getattr(prop.features, "bathrooms", None),
        criteria.min_bathrooms,
        criteria.max_bathrooms,
    )


def matches_price(prop: Property, criteria: FilterCriteria) -> bool:
    """
    Compare the representative price amount against the price bounds.

    Auction and price-on-application listings have no amount and always
    pass. A fixed or range price missing its amount fails a set bound.
    """
    if criteria.min_price is None and criteria.max_price is None:
        return True
    price = prop.price
    if price is None:
        return False
    if not price.has_deterministic_amount:
        return True
    return _within(price.representative_amount, criteria.min_price, criteria.max_price)


PREDICATES: tuple[Predicate, ...] = (
    matches_search,
    matches_property_type,
    matches_listing_type,
    matches_suburb,
    matches_state,
    matches_bedrooms,
    matches_bathrooms,
    matches_price,
)


def matches(prop: Property, criteria: FilterCriteria) -> bool:
    """Check a single property against every predicate."""
    return all(predicate(prop, criteria) for predicate in PREDICATES)


def filter_properties(
    catalog: Optional[Iterable[Property]],
    criteria: FilterCriteria,
) -> list[Property]:
    """
    Return the properties of ``catalog`` matching ``criteria``.

    Args:
        catalog: Ordered properties; None is treated as an empty catalog
        criteria: Compound filter

    Returns:
        Matching properties in catalog order
    """
    if not catalog:
        return []
    if criteria.is_default:
        return list(catalog)
    return [prop for prop in catalog if matches(prop, criteria)]


def count_active_filters(criteria: FilterCriteria) -> int:
    """Number of criteria fields that change the predicate's outcome."""
    return len(criteria.active_fields())


def _within(value, low, high) -> bool:
    if low is None and high is None:
        return True
    if value is None:
        return False
    try:
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
    except TypeError:
        return False
    return True


def select_by_ids(catalog: Optional[Sequence[Property]], ids) -> list[Property]:
    """Subsequence of ``catalog`` whose ids are in ``ids``, in catalog order."""
    if not catalog:
        return []
    return [prop for prop in catalog if prop.id in ids]
