"""Bootstrap wiring for hackathon lifecycle dependencies.

Request handlers gate registration, submission, and editing through the
service returned by get_hackathon_lifecycle_service(); organizer forms
validate schedules against get_schedule_validation_config().
"""

from __future__ import annotations

from structlog import get_logger

from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.services.hackathon_lifecycle_service import (
    HackathonLifecycleService,
)
from src.bootstrap.logging import configure_logging
from src.config.schedule_config import ScheduleValidationConfig
from src.infrastructure.adapters.time import SystemTimeAuthority

_time_authority: TimeAuthorityProtocol | None = None
_schedule_validation_config: ScheduleValidationConfig | None = None
_hackathon_lifecycle_service: HackathonLifecycleService | None = None


def get_time_authority() -> TimeAuthorityProtocol:
    """Get the time authority used by lifecycle checks."""
    global _time_authority
    if _time_authority is None:
        _time_authority = SystemTimeAuthority()
    return _time_authority


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set custom time authority for testing.

    Also drops the cached service so the next lookup uses this clock.
    """
    global _time_authority
    global _hackathon_lifecycle_service
    _time_authority = time_authority
    _hackathon_lifecycle_service = None


def get_schedule_validation_config() -> ScheduleValidationConfig:
    """Get schedule validation thresholds from the environment."""
    global _schedule_validation_config
    if _schedule_validation_config is None:
        _schedule_validation_config = ScheduleValidationConfig.from_environment()
        log = get_logger().bind(component="lifecycle_bootstrap")
        log.info(
            "schedule_validation_config_loaded",
            min_duration_seconds=_schedule_validation_config.min_duration_seconds,
            long_duration_warning_days=_schedule_validation_config.long_duration_warning_days,
            far_future_warning_days=_schedule_validation_config.far_future_warning_days,
        )
    return _schedule_validation_config


def set_schedule_validation_config(config: ScheduleValidationConfig) -> None:
    """Set custom schedule validation config for testing."""
    global _schedule_validation_config
    _schedule_validation_config = config


def get_hackathon_lifecycle_service() -> HackathonLifecycleService:
    """Get the lifecycle service instance."""
    global _hackathon_lifecycle_service
    if _hackathon_lifecycle_service is None:
        _hackathon_lifecycle_service = HackathonLifecycleService(
            time_authority=get_time_authority()
        )
    return _hackathon_lifecycle_service


def bootstrap_hackathon_lifecycle(
    environment: str | None = None,
) -> HackathonLifecycleService:
    """Configure logging, then build the lifecycle service.

    Logging is configured first so the service's bound logger uses the
    configured processors.

    Args:
        environment: Overrides ENVIRONMENT when given.

    Returns:
        The lifecycle service, ready for request handlers.
    """
    global _hackathon_lifecycle_service
    configure_logging(environment)
    _hackathon_lifecycle_service = None
    return get_hackathon_lifecycle_service()


def reset_hackathon_lifecycle_dependencies() -> None:
    """Reset hackathon lifecycle dependency singletons."""
    global _time_authority
    global _schedule_validation_config
    global _hackathon_lifecycle_service

    _time_authority = None
    _schedule_validation_config = None
    _hackathon_lifecycle_service = None
