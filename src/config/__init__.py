"""Configuration module for the hackathon lifecycle.

This module provides centralized configuration for system components.

Available Configurations:
- ScheduleValidationConfig: Thresholds for hackathon date validation
"""

from src.config.schedule_config import (
    DEFAULT_SCHEDULE_VALIDATION_CONFIG,
    ScheduleValidationConfig,
)

__all__ = [
    "ScheduleValidationConfig",
    "DEFAULT_SCHEDULE_VALIDATION_CONFIG",
]
