"""Primitives for the hackathon lifecycle domain layer.

- parse_instant: Reads stored timestamps without raising
- ensure_utc: Normalizes naive datetimes to UTC
"""

from src.domain.primitives.instants import ensure_utc, parse_instant

__all__ = ["ensure_utc", "parse_instant"]
