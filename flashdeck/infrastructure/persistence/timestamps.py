"""Timestamp conversion at the storage boundary.

The domain works with timezone-aware UTC datetimes. SQLite drops the
timezone and BSON dates are naive UTC with millisecond precision, so both
backends normalise on write and re-attach UTC on read.
"""

from datetime import UTC, datetime


def to_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime. Naive values are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def to_storage(value: datetime | None) -> datetime | None:
    """Convert a domain timestamp for a relational column (naive UTC)."""
    if value is None:
        return None
    return to_utc(value).replace(tzinfo=None)


def to_bson(value: datetime | None) -> datetime | None:
    """Convert a domain timestamp to a BSON date (naive UTC, millisecond precision)."""
    if value is None:
        return None
    value = to_utc(value)
    return value.replace(microsecond=value.microsecond // 1000 * 1000, tzinfo=None)


def from_storage(value: datetime | None) -> datetime | None:
    """Convert a stored timestamp back to an aware UTC datetime."""
    if value is None:
        return None
    return to_utc(value)
