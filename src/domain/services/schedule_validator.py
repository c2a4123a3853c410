"""Hackathon schedule validation domain service.

Validates a hackathon's start and end dates when an organizer creates or
edits one, and provides small date helpers for schedule displays. As with
the lifecycle evaluator, the reference instant is always passed in.

Schedule Constraints:
- Both dates must parse
- End must be after start, and not in the past
- Run length must meet the configured minimum
- Past starts, long runs, and far-future starts are warnings, not errors

Date Update Constraints:
- A hackathon whose current end has been reached cannot be rescheduled
- Once started, the start is fixed and the end may only move later
- Rescheduling a published hackathon warns about registered participants
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from src.config.schedule_config import (
    DEFAULT_SCHEDULE_VALIDATION_CONFIG,
    ScheduleValidationConfig,
)
from src.domain.errors.schedule import InvalidHackathonScheduleError
from src.domain.models.hackathon_state import PublicationStatus
from src.domain.primitives.instants import ensure_utc, parse_instant


@dataclass(frozen=True, eq=True)
class ScheduleValidationResult:
    """Outcome of validating hackathon dates.

    Attributes:
        is_valid: True if there are no errors (warnings are allowed).
        errors: Blocking problems, in check order.
        warnings: Non-blocking notices, in check order.
    """

    is_valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def _describe(delta: timedelta) -> str:
    """Compact wording for a threshold: '1 hour', '30 days', '1 year'."""
    total_seconds = int(delta.total_seconds())
    if total_seconds % 86400 == 0:
        days = total_seconds // 86400
        if days % 365 == 0:
            return _plural(days // 365, "year")
        return _plural(days, "day")
    if total_seconds % 3600 == 0:
        return _plural(total_seconds // 3600, "hour")
    if total_seconds % 60 == 0:
        return _plural(total_seconds // 60, "minute")
    return format_duration(delta)


def validate_hackathon_dates(
    start_date: object,
    end_date: object,
    now: datetime,
    config: ScheduleValidationConfig = DEFAULT_SCHEDULE_VALIDATION_CONFIG,
) -> ScheduleValidationResult:
    """Validate a hackathon's start and end dates.

    Args:
        start_date: Stored or submitted start instant.
        end_date: Stored or submitted end instant.
        now: Reference instant.
        config: Duration thresholds.

    Returns:
        ScheduleValidationResult listing every error and warning found.
        Unparseable dates short-circuit the remaining checks.
    """
    errors: list[str] = []
    warnings: list[str] = []

    start = parse_instant(start_date)
    end = parse_instant(end_date)

    if start is None:
        errors.append("Start date is invalid")
    if end is None:
        errors.append("End date is invalid")
    if start is None or end is None:
        return ScheduleValidationResult(is_valid=False, errors=tuple(errors))

    now = ensure_utc(now)

    if end <= start:
        errors.append("End date must be after start date")

    if end <= now:
        errors.append("End date cannot be in the past")

    if start <= now:
        warnings.append("Start date is in the past - hackathon will start immediately")

    duration = end - start
    if duration < config.min_duration:
        errors.append(f"Hackathon must be at least {_describe(config.min_duration)} long")

    if duration > config.long_duration_warning:
        warnings.append(
            f"Hackathon duration is longer than {_describe(config.long_duration_warning)}"
        )

    if start - now > config.far_future_warning:
        warnings.append(
            f"Start date is more than {_describe(config.far_future_warning)} in the future"
        )

    return ScheduleValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )


def ensure_valid_hackathon_dates(
    start_date: object,
    end_date: object,
    now: datetime,
    config: ScheduleValidationConfig = DEFAULT_SCHEDULE_VALIDATION_CONFIG,
) -> ScheduleValidationResult:
    """Validate hackathon dates, raising on any error.

    Returns:
        The result (which may still carry warnings) when valid.

    Raises:
        InvalidHackathonScheduleError: If any validation error was found.
    """
    result = validate_hackathon_dates(start_date, end_date, now, config)
    if not result.is_valid:
        raise InvalidHackathonScheduleError(result.errors)
    return result


def validate_date_update(
    current_start: object,
    current_end: object,
    new_start: object,
    new_end: object,
    status: str | None,
    now: datetime,
    config: ScheduleValidationConfig = DEFAULT_SCHEDULE_VALIDATION_CONFIG,
) -> ScheduleValidationResult:
    """Validate an organizer's change to an existing hackathon schedule.

    The new dates must first pass validate_hackathon_dates. On top of that,
    a hackathon that has reached its current end cannot be rescheduled, and
    one that has started may only be extended.

    Unlike derive_state, reaching the current end counts as ended here: the
    schedule freezes at the end instant itself.

    Args:
        current_start: Start instant as currently stored.
        current_end: End instant as currently stored.
        new_start: Requested start instant.
        new_end: Requested end instant.
        status: Publication status label of the hackathon.
        now: Reference instant.
        config: Duration thresholds for the basic checks.

    Returns:
        ScheduleValidationResult with the basic and update errors and warnings.
    """
    basic = validate_hackathon_dates(new_start, new_end, now, config)
    if not basic.is_valid:
        return basic

    errors: list[str] = []
    warnings = list(basic.warnings)

    now = ensure_utc(now)
    start = parse_instant(current_start)
    end = parse_instant(current_end)
    # Both parse: the basic checks passed.
    requested_start = parse_instant(new_start)
    requested_end = parse_instant(new_end)

    if end is not None and now >= end:
        errors.append("Cannot modify dates of a hackathon that has already ended")
        return ScheduleValidationResult(
            is_valid=False, errors=tuple(errors), warnings=tuple(warnings)
        )

    if start is not None and now >= start:
        if requested_start != start:
            errors.append("Cannot change start date of a hackathon that has already started")
        if end is not None and requested_end is not None and requested_end < end:
            errors.append("Cannot shorten a hackathon that has already started")
        if requested_end is not None and requested_end <= now:
            errors.append("Cannot set end date to past when hackathon is already running")

    if PublicationStatus.from_label(status) is PublicationStatus.PUBLISHED:
        warnings.append(
            "Changing dates of a published hackathon may affect registered participants"
        )

    return ScheduleValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )


def validate_date(value: object, field_name: str = "Date") -> ScheduleValidationResult:
    """Validate that a single value is a readable instant."""
    if parse_instant(value) is None:
        return ScheduleValidationResult(is_valid=False, errors=(f"{field_name} is invalid",))
    return ScheduleValidationResult(is_valid=True)


def is_date_in_past(value: object, now: datetime) -> bool:
    """Check whether value is at or before now. Unreadable dates are not past."""
    parsed = parse_instant(value)
    return parsed is not None and parsed <= ensure_utc(now)


def is_hackathon_active(start_date: object, end_date: object, now: datetime) -> bool:
    """Check whether now falls within [start_date, end_date], inclusive on both ends."""
    start = parse_instant(start_date)
    end = parse_instant(end_date)
    if start is None or end is None:
        return False
    return start <= ensure_utc(now) <= end


def has_hackathon_ended(end_date: object, now: datetime) -> bool:
    """Check whether now is strictly after end_date."""
    end = parse_instant(end_date)
    return end is not None and ensure_utc(now) > end


def hackathon_duration(start_date: object, end_date: object) -> timedelta | None:
    """Return end_date - start_date, or None if either is unreadable."""
    start = parse_instant(start_date)
    end = parse_instant(end_date)
    if start is None or end is None:
        return None
    return end - start


def format_duration(duration: timedelta) -> str:
    """Format a duration for display.

    Examples:
        >>> format_duration(timedelta(days=2, hours=1))
        '2 days 1 hour'
        >>> format_duration(timedelta(hours=3, minutes=5))
        '3 hours 5 minutes'
        >>> format_duration(timedelta(minutes=1))
        '1 minute'

    Negative durations format as zero minutes.
    """
    total_seconds = max(0, int(duration.total_seconds()))
    days, remainder = divmod(total_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60

    if days > 0:
        return f"{_plural(days, 'day')} {_plural(hours, 'hour')}"
    if hours > 0:
        return f"{_plural(hours, 'hour')} {_plural(minutes, 'minute')}"
    return _plural(minutes, "minute")
