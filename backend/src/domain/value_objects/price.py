"""Price value object for listing prices."""

from dataclasses import dataclass
from typing import Optional

from domain.enums import PriceType, RentalPeriod


@dataclass(frozen=True)
class Price:
    """
    Immutable value object representing a listing's asking price.
    
    Attributes:
        type: Shape of the price (fixed, range, auction, contact)
        amount: Asking amount for fixed prices
        currency: Currency code (default: AUD)
        min_amount: Lower bound of a price range
        max_amount: Upper bound of a price range
        rental_period: Billing period for rentals
    """

    type: PriceType
    amount: Optional[float] = None
    currency: str = "AUD"
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    rental_period: Optional[RentalPeriod] = None

    def __post_init__(self) -> None:
        """Validate price amounts."""
        for name in ("amount", "min_amount", "max_amount"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"Price {name} cannot be negative")
        if (
            self.min_amount is not None
            and self.max_amount is not None
            and self.min_amount > self.max_amount
        ):
            raise ValueError("Minimum price cannot exceed maximum price")

    @property
    def has_deterministic_amount(self) -> bool:
        """Auction and contact prices have no amount to compare against."""
        return self.type in (PriceType.FIXED, PriceType.RANGE)

    @property
    def representative_amount(self) -> Optional[float]:
        """
        Single amount used for price bound comparisons.
        
        Fixed prices use their amount and ranges use their lower bound, so a
        range is not excluded by a filter it partially overlaps from above.
        Returns None when no deterministic amount exists or the record is
        missing it.
        """
        if self.type is PriceType.FIXED:
            return self.amount
        if self.type is PriceType.RANGE:
            return self.min_amount
        return None

    def __str__(self) -> str:
        if self.type is PriceType.CONTACT:
            return "Price on Application"
        if self.type is PriceType.RANGE:
            return f"{_money(self.min_amount or 0)} - {_money(self.max_amount or 0)}"
        if self.amount is None:
            return "Auction" if self.type is PriceType.AUCTION else ""
        if self.rental_period is not None:
            return f"{_money(self.amount)}/{self.rental_period.unit}"
        return _money(self.amount)


def _money(value: float) -> str:
    return f"${value:,.0f}"
