"""Pytest configuration and shared fixtures."""

import asyncio
from typing import Optional

import pytest
from domain.entities import Property
from domain.repositories import ICatalogSource
from domain.enums import ListingType, PriceType, PropertyType
from domain.value_objects import Location, Price, PropertyFeatures
from application.services import FavoritesStore
from infrastructure.storage import InMemoryKeyValueStorage


def build_property(
    property_id: str,
    property_type: PropertyType = PropertyType.HOUSE,
    listing_type: ListingType = ListingType.SALE,
    price: Optional[Price] = None,
    bedrooms: Optional[int] = 3,
    bathrooms: Optional[int] = 2,
    suburb: Optional[str] = "Paddington",
    state: Optional[str] = "NSW",
    postcode: Optional[str] = "2021",
    title: str = "",
    is_premium: bool = False,
) -> Property:
    """Build a property with sensible defaults for tests."""
    return Property(
        id=property_id,
        type=property_type,
        listing_type=listing_type,
        title=title or f"Listing {property_id}",
        location=Location(suburb=suburb, state=state, postcode=postcode),
        features=PropertyFeatures(bedrooms=bedrooms, bathrooms=bathrooms),
        price=price,
        is_premium=is_premium,
    )


def fixed(amount: float) -> Price:
    return Price(type=PriceType.FIXED, amount=amount)


@pytest.fixture
def make_property():
    """Fixture exposing the property builder."""
    return build_property


@pytest.fixture
def two_listing_catalog():
    """A house at 500,000 followed by an apartment at 250,000."""
    return [
        build_property("A", PropertyType.HOUSE, price=fixed(500000)),
        build_property("B", PropertyType.APARTMENT, price=fixed(250000)),
    ]


@pytest.fixture
def mixed_catalog():
    """Catalog covering every price shape and several locations."""
    return [
        build_property(
            "house-sale", PropertyType.HOUSE, ListingType.SALE,
            price=fixed(900000), bedrooms=4, bathrooms=2,
            suburb="Paddington", state="NSW", postcode="2021",
            title="Family Home", is_premium=True,
        ),
        build_property(
            "apt-rent", PropertyType.APARTMENT, ListingType.RENT,
            price=fixed(650), bedrooms=1, bathrooms=1,
            suburb="Melbourne", state="VIC", postcode="3000",
            title="City Studio",
        ),
        build_property(
            "town-range", PropertyType.TOWNHOUSE, ListingType.SALE,
            price=Price(type=PriceType.RANGE, min_amount=400000, max_amount=700000),
            bedrooms=3, bathrooms=2,
            suburb="Bondi Beach", state="NSW", postcode="2026",
            title="Beach Townhouse",
        ),
        build_property(
            "house-auction", PropertyType.HOUSE, ListingType.AUCTION,
            price=Price(type=PriceType.AUCTION), bedrooms=5, bathrooms=3,
            suburb="Paddington", state="QLD", postcode="4064",
            title="Queenslander",
        ),
        build_property(
            "land-contact", PropertyType.LAND, ListingType.SALE,
            price=Price(type=PriceType.CONTACT), bedrooms=0, bathrooms=0,
            suburb="Baldivis", state="WA", postcode="6171",
            title="Vacant Block", is_premium=True,
        ),
    ]


@pytest.fixture
def memory_storage():
    """Empty in-memory key-value storage."""
    return InMemoryKeyValueStorage()


@pytest.fixture
def ready_favorites(memory_storage):
    """Loaded favorites store over empty in-memory storage, for sync tests."""
    store = FavoritesStore(memory_storage)
    asyncio.run(store.initialize())
    return store


class StaticCatalogSource(ICatalogSource):
    """In-memory catalog source serving fixed collections."""

    def __init__(self, regular, off_market=()):
        self.regular = list(regular)
        self.off_market = list(off_market)

    async def list_properties(self, off_market=False):
        return list(self.off_market if off_market else self.regular)

    async def get_property(self, property_id):
        for prop in (*self.regular, *self.off_market):
            if prop.id == property_id:
                return prop
        return None


@pytest.fixture
def off_market_catalog():
    """Two off-market listings."""
    return [
        build_property(
            "off-house", PropertyType.HOUSE,
            price=Price(type=PriceType.CONTACT), bedrooms=6,
            suburb="Point Piper", state="NSW", postcode="2027",
            title="Harbour Estate", is_premium=True,
        ),
        build_property(
            "off-rural", PropertyType.RURAL,
            price=Price(type=PriceType.RANGE, min_amount=2100000, max_amount=2400000),
            bedrooms=4, suburb="Maleny", state="QLD", postcode="4552",
            title="Hinterland Acreage", is_premium=True,
        ),
    ]


@pytest.fixture
def catalog_source(mixed_catalog, off_market_catalog):
    return StaticCatalogSource(mixed_catalog, off_market_catalog)
