"""Price kinds and rental periods."""

from enum import Enum


class PriceType(str, Enum):
    """Shape of a listing's asking price."""

    FIXED = "fixed"
    RANGE = "range"
    AUCTION = "auction"
    CONTACT = "contact"

    def __str__(self) -> str:
        return self.value


class RentalPeriod(str, Enum):
    """Billing period for rental prices."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def unit(self) -> str:
        return "week" if self is RentalPeriod.WEEKLY else "month"

    def __str__(self) -> str:
        return self.value
