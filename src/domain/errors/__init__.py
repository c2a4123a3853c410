"""Domain errors for the hackathon lifecycle.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from HackathonPlatformError.
"""

from src.domain.errors.schedule import InvalidHackathonScheduleError

__all__: list[str] = ["InvalidHackathonScheduleError"]
