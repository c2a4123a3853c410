"""Domain models for the hackathon lifecycle.

Contains value objects that represent core business concepts.
These models are immutable and contain no infrastructure dependencies.
"""

from src.domain.models.hackathon_state import (
    VALID_HACKATHON_STATES,
    EditDecision,
    HackathonDisplayState,
    HackathonSnapshot,
    LifecycleEvaluation,
    PublicationStatus,
    is_valid_display_state,
)

__all__: list[str] = [
    "VALID_HACKATHON_STATES",
    "EditDecision",
    "HackathonDisplayState",
    "HackathonSnapshot",
    "LifecycleEvaluation",
    "PublicationStatus",
    "is_valid_display_state",
]
