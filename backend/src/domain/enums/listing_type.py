"""Listing types describing how a property is being offered."""

from enum import Enum


class ListingType(str, Enum):
    """How a property is listed on the market."""

    SALE = "sale"
    RENT = "rent"
    AUCTION = "auction"
    OFF_MARKET = "offmarket"

    @property
    def label(self) -> str:
        """Human readable label shown on listing cards."""
        return _LABELS[self]

    def __str__(self) -> str:
        return self.value


_LABELS = {
    ListingType.SALE: "For Sale",
    ListingType.RENT: "For Rent",
    ListingType.AUCTION: "Auction",
    ListingType.OFF_MARKET: "Off Market",
}
