"""Floor selection — exact integer comparison, stable on ties."""

from collections.abc import Sequence

from src.fd_floor.domain.models import FloorResult
from src.fd_marketplace.domain.models import Listing


def select_floor(valid_listings: Sequence[Listing]) -> Listing:
    """Return the cheapest listing; the earliest one wins a tie.

    Callers must report the empty case themselves (NoValidListingsError)
    before calling; an empty sequence here is a programming error.
    """
    if not valid_listings:
        raise ValueError("select_floor requires at least one valid listing")
    best = valid_listings[0]
    for listing in valid_listings[1:]:
        # strict < keeps the first of equal prices
        if listing.price_wei < best.price_wei:
            best = listing
    return best


def build_floor_result(
    valid_listings: Sequence[Listing], total_listings: int
) -> FloorResult:
    return FloorResult(
        listing=select_floor(valid_listings),
        total_listings=total_listings,
        valid_listings=len(valid_listings),
    )
