"""Instant parsing primitives for stored hackathon timestamps.

Stored records carry their dates as strings exactly as the persistence
layer wrote them. These helpers turn such values into timezone-aware UTC
datetimes, returning None instead of raising when a value cannot be read.

Rules:
- datetime values pass through; naive values are taken as UTC
- strings are stripped; a trailing "Z" means UTC
- date-only strings ("2025-09-28") are midnight UTC
- anything else (None, numbers, garbage) is None
"""

from __future__ import annotations

from datetime import datetime, timezone


def ensure_utc(value: datetime) -> datetime:
    """Return value as a timezone-aware datetime, assuming UTC when naive.

    A tzinfo that reports no UTC offset still leaves value naive.
    """
    if value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_instant(value: object) -> datetime | None:
    """Parse a stored timestamp into an aware datetime.

    Args:
        value: A datetime, an ISO-8601 string, or anything else.

    Returns:
        The parsed instant, or None if value is not a readable instant.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    return ensure_utc(parsed)
