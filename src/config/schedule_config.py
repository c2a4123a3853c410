"""Hackathon schedule validation configuration.

This module defines the thresholds used when validating a hackathon's
start and end dates, with environment variable overrides for tuning
per deployment.

Schedule Rules:
- A hackathon must run for at least the minimum duration (error)
- Runs longer than the long-duration threshold are allowed (warning)
- Starts further out than the far-future threshold are allowed (warning)

Environment Variables:
- HACKATHON_MIN_DURATION_SECONDS: Minimum run length (default: 3600, min: 60, max: 86400)
- HACKATHON_LONG_DURATION_WARNING_DAYS: Long run warning (default: 30, min: 1, max: 365)
- HACKATHON_FAR_FUTURE_WARNING_DAYS: Far-future start warning (default: 365, min: 1, max: 3650)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _clamp(value: int, floor: int, ceiling: int) -> int:
    return max(floor, min(value, ceiling))


# =============================================================================
# Minimum Duration
# =============================================================================

# Default minimum hackathon length (1 hour)
DEFAULT_MIN_DURATION_SECONDS = 3600

# Minimum floor (1 minute)
MIN_DURATION_FLOOR_SECONDS = 60

# Maximum ceiling (1 day)
MAX_DURATION_CEILING_SECONDS = 86400

# =============================================================================
# Warning Thresholds
# =============================================================================

# Default long-run warning (30 days)
DEFAULT_LONG_DURATION_WARNING_DAYS = 30

MIN_LONG_DURATION_WARNING_DAYS = 1
MAX_LONG_DURATION_WARNING_DAYS = 365

# Default far-future start warning (1 year)
DEFAULT_FAR_FUTURE_WARNING_DAYS = 365

MIN_FAR_FUTURE_WARNING_DAYS = 1
MAX_FAR_FUTURE_WARNING_DAYS = 3650


@dataclass(frozen=True)
class ScheduleValidationConfig:
    """Thresholds for hackathon schedule validation.

    All values can be overridden via environment variables.

    Attributes:
        min_duration_seconds: Shortest allowed run, in seconds.
                             Default: 3600 (1 hour).
        long_duration_warning_days: Runs longer than this produce a warning.
                                   Default: 30 days.
        far_future_warning_days: Starts further out than this produce a warning.
                                Default: 365 days.
    """

    min_duration_seconds: int = DEFAULT_MIN_DURATION_SECONDS
    long_duration_warning_days: int = DEFAULT_LONG_DURATION_WARNING_DAYS
    far_future_warning_days: int = DEFAULT_FAR_FUTURE_WARNING_DAYS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if (
            not MIN_DURATION_FLOOR_SECONDS
            <= self.min_duration_seconds
            <= MAX_DURATION_CEILING_SECONDS
        ):
            raise ValueError(
                f"min_duration_seconds must be between {MIN_DURATION_FLOOR_SECONDS} "
                f"and {MAX_DURATION_CEILING_SECONDS}, got {self.min_duration_seconds}"
            )
        if (
            not MIN_LONG_DURATION_WARNING_DAYS
            <= self.long_duration_warning_days
            <= MAX_LONG_DURATION_WARNING_DAYS
        ):
            raise ValueError(
                f"long_duration_warning_days must be between {MIN_LONG_DURATION_WARNING_DAYS} "
                f"and {MAX_LONG_DURATION_WARNING_DAYS}, got {self.long_duration_warning_days}"
            )
        if (
            not MIN_FAR_FUTURE_WARNING_DAYS
            <= self.far_future_warning_days
            <= MAX_FAR_FUTURE_WARNING_DAYS
        ):
            raise ValueError(
                f"far_future_warning_days must be between {MIN_FAR_FUTURE_WARNING_DAYS} "
                f"and {MAX_FAR_FUTURE_WARNING_DAYS}, got {self.far_future_warning_days}"
            )

    @property
    def min_duration(self) -> timedelta:
        """Minimum run length as a timedelta."""
        return timedelta(seconds=self.min_duration_seconds)

    @property
    def long_duration_warning(self) -> timedelta:
        """Long-run warning threshold as a timedelta."""
        return timedelta(days=self.long_duration_warning_days)

    @property
    def far_future_warning(self) -> timedelta:
        """Far-future start warning threshold as a timedelta."""
        return timedelta(days=self.far_future_warning_days)

    @classmethod
    def from_environment(cls) -> ScheduleValidationConfig:
        """Create config from environment variables with defaults.

        Invalid integers fall back to the default; out-of-range values
        are clamped to the allowed bounds.

        Returns:
            ScheduleValidationConfig with values from environment or defaults.
        """
        min_duration = _clamp(
            _get_int_env("HACKATHON_MIN_DURATION_SECONDS", DEFAULT_MIN_DURATION_SECONDS),
            MIN_DURATION_FLOOR_SECONDS,
            MAX_DURATION_CEILING_SECONDS,
        )
        long_duration = _clamp(
            _get_int_env(
                "HACKATHON_LONG_DURATION_WARNING_DAYS", DEFAULT_LONG_DURATION_WARNING_DAYS
            ),
            MIN_LONG_DURATION_WARNING_DAYS,
            MAX_LONG_DURATION_WARNING_DAYS,
        )
        far_future = _clamp(
            _get_int_env("HACKATHON_FAR_FUTURE_WARNING_DAYS", DEFAULT_FAR_FUTURE_WARNING_DAYS),
            MIN_FAR_FUTURE_WARNING_DAYS,
            MAX_FAR_FUTURE_WARNING_DAYS,
        )

        return cls(
            min_duration_seconds=min_duration,
            long_duration_warning_days=long_duration,
            far_future_warning_days=far_future,
        )


# Default production config
DEFAULT_SCHEDULE_VALIDATION_CONFIG = ScheduleValidationConfig()
