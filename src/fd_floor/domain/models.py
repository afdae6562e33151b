"""Domain models for fd_floor — pure dataclasses, no business logic."""

from dataclasses import dataclass

from src.fd_marketplace.domain.models import Listing


@dataclass(frozen=True)
class FloorResult:
    listing: Listing
    total_listings: int   # before expiry filtering
    valid_listings: int   # after expiry filtering
