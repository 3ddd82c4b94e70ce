"""Date-time conversions shared by the serializers."""

from __future__ import annotations

from datetime import datetime, timezone

# Returned for unset timestamps
INVALID_SECS = -1


def to_secs_since_epoch(value: datetime | None) -> int:
    """Convert a datetime to integer seconds since the Unix epoch.

    Naive datetimes are taken as UTC. ``None`` yields ``-1``.
    """
    if value is None:
        return INVALID_SECS
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def from_secs_since_epoch(secs: int) -> datetime | None:
    """Inverse of :func:`to_secs_since_epoch`; ``-1`` maps back to ``None``."""
    if secs < 0:
        return None
    return datetime.fromtimestamp(secs, tz=timezone.utc)
