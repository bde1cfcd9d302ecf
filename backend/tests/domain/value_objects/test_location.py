"""Unit tests for Location value object."""

import pytest
from domain.value_objects import Location


class TestLocationValidation:
    """Test Location validation logic."""

    def test_valid_location_with_coordinates(self):
        """Test creating a location with coordinates."""
        location = Location(
            suburb="Paddington", state="NSW", postcode="2021",
            latitude=-33.88, longitude=151.22,
        )
        assert location.suburb == "Paddington"
        assert location.has_coordinates is True

    def test_all_fields_are_optional(self):
        """Test that an empty location is valid."""
        location = Location()
        assert location.suburb is None
        assert location.has_coordinates is False

    def test_latitude_out_of_range_raises_error(self):
        """Test that latitude beyond 90 raises ValueError."""
        with pytest.raises(ValueError, match="Latitude"):
            Location(latitude=91.0, longitude=0.0)

    def test_longitude_out_of_range_raises_error(self):
        """Test that longitude beyond 180 raises ValueError."""
        with pytest.raises(ValueError, match="Longitude"):
            Location(latitude=0.0, longitude=-181.0)


class TestLocationFormatting:
    """Test Location string formatting."""

    def test_str_with_suburb_state_postcode(self):
        """Test __str__ renders the card line."""
        location = Location(suburb="Bondi Beach", state="NSW", postcode="2026")
        assert str(location) == "Bondi Beach, NSW 2026"

    def test_str_falls_back_to_address(self):
        """Test __str__ uses the address when no suburb data exists."""
        location = Location(address="Lot 12 Ridge Road")
        assert str(location) == "Lot 12 Ridge Road"

    def test_immutability(self):
        """Test that Location is immutable (frozen dataclass)."""
        location = Location(suburb="Maleny")
        with pytest.raises(Exception):  # FrozenInstanceError
            location.suburb = "Montville"
