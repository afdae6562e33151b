"""Staleness classification for cached collection stats."""

from datetime import datetime, timezone

from src.fd_stats.domain.models import Freshness

# 20 minutes
STALENESS_THRESHOLD_SECONDS = 1200


def classify_freshness(
    last_updated_at: datetime | None,
    now: datetime,
    threshold_seconds: float = STALENESS_THRESHOLD_SECONDS,
) -> Freshness:
    """Never-updated snapshots are always stale; otherwise stale past the threshold."""
    if last_updated_at is None:
        return Freshness(age_seconds=None, is_stale=True)
    if last_updated_at.tzinfo is None:
        # TIMESTAMP WITHOUT TIME ZONE columns are written in UTC
        last_updated_at = last_updated_at.replace(tzinfo=timezone.utc)
    age = (now - last_updated_at).total_seconds()
    return Freshness(age_seconds=age, is_stale=age > threshold_seconds)
