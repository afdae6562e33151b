"""Expiry filtering — upstream "active" listings are re-validated locally.

The marketplace index lags, so orders past their endTime still show up.
"""

from collections.abc import Callable, Iterable
from operator import attrgetter
from typing import TypeVar

T = TypeVar("T")


def is_valid_at(end_time: int, now: int) -> bool:
    """A listing is executable while its end time is strictly in the future."""
    return end_time > now


def filter_valid_listings(
    listings: Iterable[T],
    now: int,
    end_time: Callable[[T], int] = attrgetter("end_time"),
) -> list[T]:
    """Keep listings with end_time > now, preserving input order.

    end_time reads the expiry from each item, so raw marketplace payloads
    can be filtered before the rest of their fields are parsed.
    """
    return [listing for listing in listings if is_valid_at(end_time(listing), now)]
