"""Filter criteria value object for property searches."""

from dataclasses import dataclass, field, fields, replace
from typing import Iterable, Optional, Union

from domain.enums import ListingType, PropertyType

Number = Union[int, float]

_BOUND_PAIRS = (
    ("min_bedrooms", "max_bedrooms"),
    ("min_bathrooms", "max_bathrooms"),
    ("min_price", "max_price"),
)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Immutable value object describing a compound property search.

    Every field defaults to "no constraint": an empty search string, empty
    sets and unset (None) bounds. A present bound is inclusive, and zero is
    a valid bound distinct from None.

    Attributes:
        search: Free text matched against suburb, state, postcode and title
        property_types: Accepted property types (empty = any)
        listing_types: Accepted listing types (empty = any)
        min_bedrooms: Inclusive lower bedroom bound
        max_bedrooms: Inclusive upper bedroom bound
        min_bathrooms: Inclusive lower bathroom bound
        max_bathrooms: Inclusive upper bathroom bound
        min_price: Inclusive lower bound on the representative price
        max_price: Inclusive upper bound on the representative price
        suburbs: Accepted suburbs, exact match (empty = any)
        states: Accepted states, exact match (empty = any)
    """

    search: str = ""
    property_types: frozenset[PropertyType] = field(default_factory=frozenset)
    listing_types: frozenset[ListingType] = field(default_factory=frozenset)
    min_bedrooms: Optional[int] = None
    max_bedrooms: Optional[int] = None
    min_bathrooms: Optional[int] = None
    max_bathrooms: Optional[int] = None
    min_price: Optional[Number] = None
    max_price: Optional[Number] = None
    suburbs: frozenset[str] = field(default_factory=frozenset)
    states: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Normalize collections and validate bounds."""
        # frozen dataclass: normalization goes through object.__setattr__
        object.__setattr__(self, "search", (self.search or "").strip())
        object.__setattr__(
            self, "property_types", _to_frozenset(self.property_types, PropertyType)
        )
        object.__setattr__(
            self, "listing_types", _to_frozenset(self.listing_types, ListingType)
        )
        object.__setattr__(self, "suburbs", _to_frozenset(self.suburbs))
        object.__setattr__(self, "states", _to_frozenset(self.states))

        for low_name, high_name in _BOUND_PAIRS:
            low = getattr(self, low_name)
            high = getattr(self, high_name)
            for name, value in ((low_name, low), (high_name, high)):
                if value is None:
                    continue
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"{name} must be a number")
                if value < 0:
                    raise ValueError(f"{name} cannot be negative")
            if low is not None and high is not None and low > high:
                raise ValueError(f"{low_name} cannot exceed {high_name}")

    def active_fields(self) -> tuple[str, ...]:
        """
        Names of the fields that constrain the search.

        A set-valued field counts once however many values it holds, and
        each present bound counts once.
        """
        active = []
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (str, frozenset)):
                if value:
                    active.append(f.name)
            elif value is not None:
                active.append(f.name)
        return tuple(active)

    @property
    def is_default(self) -> bool:
        return not self.active_fields()

    def with_search(self, text: str) -> "FilterCriteria":
        """Return a copy with a new search string."""
        return replace(self, search=text)

    def toggle_property_type(self, property_type: PropertyType) -> "FilterCriteria":
        """Return a copy with the property type selected or deselected."""
        return replace(
            self,
            property_types=self.property_types ^ {PropertyType(property_type)},
        )

    def toggle_listing_type(self, listing_type: ListingType) -> "FilterCriteria":
        """Return a copy with the listing type selected or deselected."""
        return replace(
            self,
            listing_types=self.listing_types ^ {ListingType(listing_type)},
        )

    def cleared(self) -> "FilterCriteria":
        """Return criteria with every constraint removed, keeping the search text."""
        return FilterCriteria(search=self.search)

    def __str__(self) -> str:
        active = self.active_fields()
        if not active:
            return "FilterCriteria(<none>)"
        return "FilterCriteria(" + ", ".join(
            f"{name}={_render(getattr(self, name))}" for name in active
        ) + ")"


def _to_frozenset(values: Optional[Iterable], enum_type=None) -> frozenset:
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    if enum_type is None:
        return frozenset(values)
    return frozenset(enum_type(value) for value in values)


def _render(value) -> str:
    if isinstance(value, frozenset):
        return "{" + ", ".join(sorted(str(v) for v in value)) + "}"
    return str(value)
