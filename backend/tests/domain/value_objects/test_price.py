"""Unit tests for Price value object."""

import pytest
from domain.enums import PriceType, RentalPeriod
from domain.value_objects import Price


class TestPriceValidation:
    """Test Price validation logic."""

    def test_negative_amount_raises_error(self):
        """Test that a negative amount raises ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            Price(type=PriceType.FIXED, amount=-1)

    def test_inverted_range_raises_error(self):
        """Test that min_amount > max_amount raises ValueError."""
        with pytest.raises(ValueError, match="Minimum price cannot exceed maximum price"):
            Price(type=PriceType.RANGE, min_amount=500, max_amount=400)

    def test_zero_amount_is_valid(self):
        """Test that zero is a valid amount (edge case)."""
        assert Price(type=PriceType.FIXED, amount=0).amount == 0


class TestRepresentativeAmount:
    """Test the amount used for price bound comparisons."""

    def test_fixed_uses_amount(self):
        assert Price(type=PriceType.FIXED, amount=500000).representative_amount == 500000

    def test_range_uses_lower_bound(self):
        price = Price(type=PriceType.RANGE, min_amount=400000, max_amount=700000)
        assert price.representative_amount == 400000

    def test_range_without_lower_bound_has_no_amount(self):
        price = Price(type=PriceType.RANGE, max_amount=700000)
        assert price.representative_amount is None

    @pytest.mark.parametrize("price_type", [PriceType.AUCTION, PriceType.CONTACT])
    def test_auction_and_contact_have_no_amount(self, price_type):
        price = Price(type=price_type, amount=123)
        assert price.representative_amount is None
        assert price.has_deterministic_amount is False


class TestPriceFormatting:
    """Test Price display labels."""

    def test_contact(self):
        assert str(Price(type=PriceType.CONTACT)) == "Price on Application"

    def test_range(self):
        price = Price(type=PriceType.RANGE, min_amount=1400000, max_amount=1550000)
        assert str(price) == "$1,400,000 - $1,550,000"

    def test_weekly_rent(self):
        price = Price(type=PriceType.FIXED, amount=750, rental_period=RentalPeriod.WEEKLY)
        assert str(price) == "$750/week"

    def test_monthly_rent(self):
        price = Price(type=PriceType.FIXED, amount=3200, rental_period=RentalPeriod.MONTHLY)
        assert str(price) == "$3,200/month"

    def test_fixed(self):
        assert str(Price(type=PriceType.FIXED, amount=1850000)) == "$1,850,000"

    def test_auction_without_amount(self):
        assert str(Price(type=PriceType.AUCTION)) == "Auction"
