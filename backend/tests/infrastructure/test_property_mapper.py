"""Unit tests for the catalog record mapper."""

import math

import pytest

from domain.entities import MediaType
from domain.enums import ListingType, PriceType, PropertyType, RentalPeriod
from infrastructure.catalog import property_from_dict


def record(**overrides):
    data = {
        "id": "prop-1",
        "type": "house",
        "listingType": "sale",
        "title": "Family Home",
        "location": {"suburb": "Paddington", "state": "NSW", "postcode": "2021"},
        "features": {"bedrooms": 4, "bathrooms": 2, "parkingSpaces": 2},
        "price": {"type": "fixed", "amount": 1850000},
    }
    data.update(overrides)
    return data


class TestPropertyFromDict:
    """Test mapping raw records onto Property."""

    def test_maps_camel_case_record(self):
        prop = property_from_dict(record(isPremium=True))

        assert prop.id == "prop-1"
        assert prop.type == PropertyType.HOUSE
        assert prop.listing_type == ListingType.SALE
        assert prop.location.suburb == "Paddington"
        assert prop.features.bedrooms == 4
        assert prop.features.parking_spaces == 2
        assert prop.price.type == PriceType.FIXED
        assert prop.price.amount == 1850000
        assert prop.is_premium is True

    def test_accepts_snake_case_keys(self):
        data = record()
        del data["listingType"]
        data["listing_type"] = "rent"
        data["price"] = {"type": "fixed", "amount": 750, "rental_period": "weekly"}

        prop = property_from_dict(data)

        assert prop.listing_type == ListingType.RENT
        assert prop.price.rental_period == RentalPeriod.WEEKLY

    def test_missing_optional_fields_become_none(self):
        prop = property_from_dict(
            {"id": "bare", "type": "land", "listingType": "sale"}
        )
        assert prop.price is None
        assert prop.features.bedrooms is None
        assert prop.location.suburb is None
        assert prop.media == ()
        assert prop.agent is None

    def test_wrongly_typed_counts_become_none(self):
        prop = property_from_dict(record(features={"bedrooms": "many", "bathrooms": True}))
        assert prop.features.bedrooms is None
        assert prop.features.bathrooms is None

    def test_unknown_price_type_becomes_none(self):
        prop = property_from_dict(record(price={"type": "barter"}))
        assert prop.price is None

    def test_range_price(self):
        prop = property_from_dict(
            record(price={"type": "range", "minAmount": 1400000, "maxAmount": 1550000})
        )
        assert prop.price.representative_amount == 1400000

    def test_media_and_agent(self):
        prop = property_from_dict(
            record(
                media=[
                    {"id": "m1", "url": "https://example.com/1.jpg", "type": "image"},
                    {"url": "https://example.com/tour", "type": "3d"},
                    {"type": "image"},
                ],
                agent={"id": "agent-1", "name": "Sarah Chen", "agency": "Haus"},
            )
        )
        assert [m.type for m in prop.media] == [MediaType.IMAGE, MediaType.THREE_D]
        assert prop.media[1].id == "https://example.com/tour"
        assert prop.agent.name == "Sarah Chen"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"id": None},
            {"id": "  "},
            {"type": "castle"},
            {"listingType": "swap"},
        ],
    )
    def test_invalid_records_raise(self, overrides):
        with pytest.raises(ValueError):
            property_from_dict(record(**overrides))


class TestMalformedAttributes:
    """Bad optional attributes are dropped without losing the listing."""

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan, 1e400])
    def test_non_finite_numbers_become_none(self, value):
        prop = property_from_dict(
            record(
                features={"bedrooms": value, "bathrooms": 2, "landSize": value},
                price={"type": "fixed", "amount": value},
            )
        )
        assert prop.features.bedrooms is None
        assert prop.features.land_size is None
        assert prop.features.bathrooms == 2
        assert prop.price.amount is None

    def test_negative_count_drops_only_that_count(self):
        prop = property_from_dict(record(features={"bedrooms": -1, "bathrooms": 2}))
        assert prop.features.bedrooms is None
        assert prop.features.bathrooms == 2

    @pytest.mark.parametrize(
        "price",
        [
            {"type": "fixed", "amount": -5},
            {"type": "range", "minAmount": 10, "maxAmount": 5},
        ],
    )
    def test_invalid_price_becomes_none(self, price):
        prop = property_from_dict(record(price=price))
        assert prop.id == "prop-1"
        assert prop.price is None

    def test_out_of_range_coordinates_are_dropped(self):
        prop = property_from_dict(
            record(location={"suburb": "Paddington", "latitude": 120, "longitude": 151.2})
        )
        assert prop.location.suburb == "Paddington"
        assert prop.location.has_coordinates is False
