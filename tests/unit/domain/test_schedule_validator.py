"""Unit tests for hackathon schedule validation.

Tests verify that:
- Valid schedules pass with no errors
- Unparseable dates short-circuit with field-specific errors
- Ordering, past-end, and minimum-duration errors are reported together
- Past starts, long runs, and far-future starts are warnings only
- Thresholds follow ScheduleValidationConfig
- Rescheduling freezes ended hackathons and only extends started ones
- Date helpers fail closed on unreadable input
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.config.schedule_config import ScheduleValidationConfig
from src.domain.errors.schedule import InvalidHackathonScheduleError
from src.domain.exceptions import HackathonPlatformError
from src.domain.models.hackathon_state import HackathonDisplayState, HackathonSnapshot
from src.domain.services.hackathon_lifecycle import derive_state
from src.domain.services.schedule_validator import (
    ScheduleValidationResult,
    ensure_valid_hackathon_dates,
    format_duration,
    hackathon_duration,
    has_hackathon_ended,
    is_date_in_past,
    is_hackathon_active,
    validate_date,
    validate_date_update,
    validate_hackathon_dates,
)

NOW = datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


def _iso(instant: datetime) -> str:
    return instant.isoformat().replace("+00:00", "Z")


class TestValidateHackathonDates:
    """Tests for validate_hackathon_dates."""

    def test_valid_schedule(self) -> None:
        result = validate_hackathon_dates(
            _iso(NOW + timedelta(days=1)), _iso(NOW + timedelta(days=3)), NOW
        )

        assert result == ScheduleValidationResult(is_valid=True)

    def test_invalid_start(self) -> None:
        result = validate_hackathon_dates("soon", _iso(NOW + timedelta(days=3)), NOW)

        assert result.is_valid is False
        assert result.errors == ("Start date is invalid",)

    def test_both_invalid_short_circuits(self) -> None:
        result = validate_hackathon_dates("", None, NOW)

        assert result.errors == ("Start date is invalid", "End date is invalid")
        assert result.warnings == ()

    def test_end_before_start(self) -> None:
        result = validate_hackathon_dates(
            _iso(NOW + timedelta(days=3)), _iso(NOW + timedelta(days=2)), NOW
        )

        assert result.is_valid is False
        assert "End date must be after start date" in result.errors
        assert "Hackathon must be at least 1 hour long" in result.errors

    def test_end_in_past(self) -> None:
        result = validate_hackathon_dates(
            _iso(NOW - timedelta(days=3)), _iso(NOW - timedelta(days=1)), NOW
        )

        assert result.is_valid is False
        assert "End date cannot be in the past" in result.errors
        assert result.warnings == (
            "Start date is in the past - hackathon will start immediately",
        )

    def test_end_exactly_now_is_past(self) -> None:
        result = validate_hackathon_dates(_iso(NOW - timedelta(days=1)), _iso(NOW), NOW)
        assert "End date cannot be in the past" in result.errors

    def test_shorter_than_one_hour(self) -> None:
        start = NOW + timedelta(days=1)
        result = validate_hackathon_dates(_iso(start), _iso(start + timedelta(minutes=59)), NOW)

        assert result.errors == ("Hackathon must be at least 1 hour long",)

    def test_exactly_one_hour_is_valid(self) -> None:
        start = NOW + timedelta(days=1)
        result = validate_hackathon_dates(_iso(start), _iso(start + timedelta(hours=1)), NOW)

        assert result.is_valid is True

    def test_long_duration_warning(self) -> None:
        start = NOW + timedelta(days=1)
        result = validate_hackathon_dates(_iso(start), _iso(start + timedelta(days=31)), NOW)

        assert result.is_valid is True
        assert result.warnings == ("Hackathon duration is longer than 30 days",)

    def test_far_future_warning(self) -> None:
        start = NOW + timedelta(days=400)
        result = validate_hackathon_dates(_iso(start), _iso(start + timedelta(days=2)), NOW)

        assert result.is_valid is True
        assert result.warnings == ("Start date is more than 1 year in the future",)

    def test_thresholds_follow_config(self) -> None:
        config = ScheduleValidationConfig(
            min_duration_seconds=7200,
            long_duration_warning_days=7,
            far_future_warning_days=30,
        )
        start = NOW + timedelta(days=60)

        short = validate_hackathon_dates(
            _iso(start), _iso(start + timedelta(hours=1)), NOW, config
        )
        long = validate_hackathon_dates(
            _iso(start), _iso(start + timedelta(days=8)), NOW, config
        )

        assert short.errors == ("Hackathon must be at least 2 hours long",)
        assert long.warnings == (
            "Hackathon duration is longer than 7 days",
            "Start date is more than 30 days in the future",
        )

    def test_accepts_datetimes(self) -> None:
        result = validate_hackathon_dates(
            NOW + timedelta(days=1), NOW + timedelta(days=2), NOW
        )
        assert result.is_valid is True


class TestEnsureValidHackathonDates:
    """Tests for the raising variant."""

    def test_returns_result_with_warnings(self) -> None:
        result = ensure_valid_hackathon_dates(
            _iso(NOW - timedelta(hours=1)), _iso(NOW + timedelta(days=1)), NOW
        )
        assert result.is_valid is True
        assert len(result.warnings) == 1

    def test_raises_with_all_errors(self) -> None:
        with pytest.raises(InvalidHackathonScheduleError) as exc_info:
            ensure_valid_hackathon_dates(
                _iso(NOW - timedelta(days=1)), _iso(NOW - timedelta(days=2)), NOW
            )

        assert exc_info.value.errors == (
            "End date must be after start date",
            "End date cannot be in the past",
            "Hackathon must be at least 1 hour long",
        )
        assert "End date cannot be in the past" in str(exc_info.value)

    def test_error_is_platform_error(self) -> None:
        with pytest.raises(HackathonPlatformError):
            ensure_valid_hackathon_dates("", "", NOW)


class TestValidateDate:
    """Tests for validate_date."""

    def test_valid(self) -> None:
        assert validate_date("2026-01-15T10:00:00Z").is_valid is True

    def test_invalid_uses_field_name(self) -> None:
        result = validate_date("nope", field_name="Registration deadline")
        assert result.errors == ("Registration deadline is invalid",)

    def test_default_field_name(self) -> None:
        assert validate_date(None).errors == ("Date is invalid",)


class TestDateHelpers:
    """Tests for the date helper predicates."""

    def test_is_date_in_past(self) -> None:
        assert is_date_in_past(_iso(NOW - timedelta(seconds=1)), NOW) is True
        assert is_date_in_past(_iso(NOW), NOW) is True
        assert is_date_in_past(_iso(NOW + timedelta(seconds=1)), NOW) is False
        assert is_date_in_past("garbage", NOW) is False

    def test_is_hackathon_active_inclusive(self) -> None:
        start = _iso(NOW)
        end = _iso(NOW + timedelta(days=1))

        assert is_hackathon_active(start, end, NOW) is True
        assert is_hackathon_active(start, end, NOW + timedelta(days=1)) is True
        assert is_hackathon_active(start, end, NOW - timedelta(seconds=1)) is False
        assert is_hackathon_active(start, "", NOW) is False

    def test_has_hackathon_ended_strict(self) -> None:
        assert has_hackathon_ended(_iso(NOW), NOW) is False
        assert has_hackathon_ended(_iso(NOW), NOW + timedelta(microseconds=1)) is True
        assert has_hackathon_ended(None, NOW) is False

    def test_hackathon_duration(self) -> None:
        assert hackathon_duration(_iso(NOW), _iso(NOW + timedelta(hours=36))) == timedelta(
            hours=36
        )
        assert hackathon_duration("", _iso(NOW)) is None


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            (timedelta(days=2, hours=1), "2 days 1 hour"),
            (timedelta(days=1), "1 day 0 hours"),
            (timedelta(hours=3, minutes=5), "3 hours 5 minutes"),
            (timedelta(hours=1, minutes=1), "1 hour 1 minute"),
            (timedelta(minutes=45, seconds=59), "45 minutes"),
            (timedelta(minutes=1), "1 minute"),
            (timedelta(0), "0 minutes"),
            (timedelta(hours=-3), "0 minutes"),
        ],
    )
    def test_format(self, duration: timedelta, expected: str) -> None:
        assert format_duration(duration) == expected


class TestValidateDateUpdate:
    """Tests for rescheduling an existing hackathon."""

    PAST_START_WARNING = "Start date is in the past - hackathon will start immediately"
    PUBLISHED_WARNING = (
        "Changing dates of a published hackathon may affect registered participants"
    )
    ENDED_ERROR = "Cannot modify dates of a hackathon that has already ended"

    def test_reschedule_before_start(self) -> None:
        result = validate_date_update(
            _iso(NOW + timedelta(days=1)),
            _iso(NOW + timedelta(days=3)),
            _iso(NOW + timedelta(days=2)),
            _iso(NOW + timedelta(days=4)),
            "draft",
            NOW,
        )

        assert result == ScheduleValidationResult(is_valid=True)

    def test_invalid_new_dates_return_basic_result(self) -> None:
        """Basic validation failures are returned without the update checks."""
        result = validate_date_update(
            _iso(NOW - timedelta(days=3)),
            _iso(NOW - timedelta(days=1)),
            "soon",
            _iso(NOW + timedelta(days=2)),
            "published",
            NOW,
        )

        assert result == ScheduleValidationResult(
            is_valid=False, errors=("Start date is invalid",)
        )

    def test_ended_hackathon_is_frozen(self) -> None:
        result = validate_date_update(
            _iso(NOW - timedelta(days=3)),
            _iso(NOW - timedelta(days=1)),
            _iso(NOW - timedelta(days=3)),
            _iso(NOW + timedelta(days=2)),
            "published",
            NOW,
        )

        assert result.is_valid is False
        assert result.errors == (self.ENDED_ERROR,)
        assert result.warnings == (self.PAST_START_WARNING,)

    def test_reaching_current_end_counts_as_ended(self) -> None:
        """At the end instant the schedule is frozen while the state is still live."""
        current_start = _iso(NOW - timedelta(days=2))
        current_end = _iso(NOW)
        snapshot = HackathonSnapshot(
            status="published", start_date=current_start, end_date=current_end
        )

        at_end = validate_date_update(
            current_start,
            current_end,
            current_start,
            _iso(NOW + timedelta(days=1)),
            "published",
            NOW,
        )
        just_before = validate_date_update(
            current_start,
            current_end,
            current_start,
            _iso(NOW + timedelta(days=1)),
            "published",
            NOW - timedelta(microseconds=1),
        )

        assert derive_state(snapshot, NOW) is HackathonDisplayState.LIVE
        assert at_end.errors == (self.ENDED_ERROR,)
        assert just_before.is_valid is True

    def test_started_hackathon_can_be_extended(self) -> None:
        current_start = _iso(NOW - timedelta(days=1))

        result = validate_date_update(
            current_start,
            _iso(NOW + timedelta(days=1)),
            current_start,
            _iso(NOW + timedelta(days=2)),
            "draft",
            NOW,
        )

        assert result.is_valid is True
        assert result.warnings == (self.PAST_START_WARNING,)

    def test_started_hackathon_start_and_length_are_fixed(self) -> None:
        result = validate_date_update(
            _iso(NOW - timedelta(days=1)),
            _iso(NOW + timedelta(days=1)),
            _iso(NOW - timedelta(hours=2)),
            _iso(NOW + timedelta(hours=12)),
            "draft",
            NOW,
        )

        assert result.errors == (
            "Cannot change start date of a hackathon that has already started",
            "Cannot shorten a hackathon that has already started",
        )

    def test_start_instant_counts_as_started(self) -> None:
        result = validate_date_update(
            _iso(NOW),
            _iso(NOW + timedelta(days=1)),
            _iso(NOW + timedelta(hours=1)),
            _iso(NOW + timedelta(days=1)),
            "draft",
            NOW,
        )

        assert result.errors == (
            "Cannot change start date of a hackathon that has already started",
        )

    def test_same_start_in_other_offset_is_unchanged(self) -> None:
        """Start dates are compared as instants, not as strings."""
        ist = timezone(timedelta(hours=5, minutes=30))
        current_start = NOW - timedelta(days=1)

        result = validate_date_update(
            _iso(current_start),
            _iso(NOW + timedelta(days=1)),
            current_start.astimezone(ist).isoformat(),
            _iso(NOW + timedelta(days=1)),
            "draft",
            NOW,
        )

        assert result.is_valid is True

    @pytest.mark.parametrize("status", ["published", "PUBLISHED"])
    def test_published_warns_about_participants(self, status: str) -> None:
        result = validate_date_update(
            _iso(NOW + timedelta(days=1)),
            _iso(NOW + timedelta(days=3)),
            _iso(NOW + timedelta(days=2)),
            _iso(NOW + timedelta(days=4)),
            status,
            NOW,
        )

        assert result.is_valid is True
        assert result.warnings == (self.PUBLISHED_WARNING,)

    def test_unreadable_current_dates_skip_update_checks(self) -> None:
        result = validate_date_update(
            "",
            None,
            _iso(NOW - timedelta(hours=1)),
            _iso(NOW + timedelta(days=1)),
            None,
            NOW,
        )

        assert result.is_valid is True
        assert result.warnings == (self.PAST_START_WARNING,)
