"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Request validation
  2xxx: Listings / floor price
  3xxx: Fulfillment
  4xxx: Collection stats
  9xxx: System / upstream
"""

from typing import Any


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
        details: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        self.details = details
        self.extra = extra or {}
        super().__init__(message)


# --- 1xxx: Validation ---

class ValidationError(AppError):
    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(1001, message, 400, details)


# --- 2xxx / 4xxx: Not found ---

class NotFoundError(AppError):
    """No qualifying data exists for the request."""

    def __init__(self, code: int, message: str, extra: dict[str, Any] | None = None) -> None:
        super().__init__(code, message, 404, extra=extra)


class NoActiveListingsError(NotFoundError):
    def __init__(self, slug: str) -> None:
        super().__init__(2001, "No active listings found", extra={"listings": []})
        self.slug = slug


class NoValidListingsError(NotFoundError):
    def __init__(self, slug: str, total_listings: int) -> None:
        super().__init__(
            2002, "No valid (non-expired) listings found", extra={"listings": []}
        )
        self.slug = slug
        self.total_listings = total_listings


class CollectionStatsNotFoundError(NotFoundError):
    def __init__(self, contract: str) -> None:
        super().__init__(4001, f"Collection not found: {contract}")


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(
        self, detail: str = "Internal server error", cause: str | None = None
    ) -> None:
        super().__init__(9002, detail, 500, details=cause)


class UpstreamError(AppError):
    """Marketplace answered with a non-success status.

    status_code and body are kept verbatim for diagnosis. Statuses below 400
    (e.g. an unfollowed redirect) are reported to the caller as 502.
    """

    def __init__(self, message: str, status_code: int, body: str) -> None:
        http_status = status_code if status_code >= 400 else 502
        super().__init__(9003, f"{message}: {status_code}", http_status, details=body)
        self.status_code = status_code
        self.body = body
