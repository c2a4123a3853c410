"""
Domain layer - Pure business logic for the hackathon lifecycle.

This layer contains:
- Domain models (snapshot, display state, edit decision)
- Domain services (lifecycle evaluator, schedule validation)
- Primitives (instant parsing)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or config
except for configuration value objects. No clock reads, no logging.
"""

from src.domain.errors import InvalidHackathonScheduleError
from src.domain.exceptions import HackathonPlatformError
from src.domain.models import (
    EditDecision,
    HackathonDisplayState,
    HackathonSnapshot,
    LifecycleEvaluation,
)

__all__: list[str] = [
    "EditDecision",
    "HackathonDisplayState",
    "HackathonPlatformError",
    "HackathonSnapshot",
    "InvalidHackathonScheduleError",
    "LifecycleEvaluation",
]
